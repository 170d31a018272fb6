"""Allow running as ``python -m podexport``."""

from podexport.cli import app

app(prog_name="podexport")
