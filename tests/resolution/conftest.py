"""Shared fixtures for resolution tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

ORG_MODEL = """\
'use strict'

const Model = use('Model')

class Org extends Model {
  /** @type {typeof import('App/Services/Repository')} */
  static repository

  static boot() {
    super.boot()
  }
}

module.exports = Org
"""

REPOSITORY = """\
'use strict'

class Repository {
  constructor(model) {
    this.model = model
  }

  static async search(query) {
    return this.model.query().where(query)
  }

  list() {
    return []
  }
}

module.exports = Repository
"""

REPO_SERVICE = """\
'use strict'

class Repo {
  static findAll() {
    return []
  }

  static search(term) {
    return term
  }
}

module.exports = Repo
"""

UTILS_HELPER = """\
exports.slugify = (text) => text.toLowerCase()

function formatDate(date) {
  return date.toISOString()
}

module.exports = {
  formatDate,
  pad: (s) => s,
  options: { nested: true, deep: 1 },
  slugify
}
"""


def _write_file(root: Path, relative: str, content: str = "") -> Path:
    """Write content to root/relative, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Factory writing content to root/relative, creating parent directories."""
    return _write_file


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project tree using the app/ layout with flat and nested models."""
    root = tmp_path / "project"
    _write_file(root, "app/Models/Org.js", ORG_MODEL)
    _write_file(root, "app/Models/Client/Client.js", "class Client {}\nmodule.exports = Client\n")
    _write_file(root, "app/Models/Billing/Invoices/Invoice.ts", "export class Invoice {}\n")
    _write_file(root, "app/Services/Repository.js", REPOSITORY)
    _write_file(root, "app/Services/Repo.js", REPO_SERVICE)
    _write_file(root, "app/Helpers/Utils.js", UTILS_HELPER)
    return root
