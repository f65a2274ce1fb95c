"""usenav - go to definition and completion for use('App/...') module trees."""

__version__ = "0.1.0"
