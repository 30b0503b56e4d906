"""
farmcast.reporting — Advisory report formatting and export.

Modules:
  formatters — ASCII terminal formatters for Typer CLI commands.
  export     — JSON / CSV file export helpers.
"""
