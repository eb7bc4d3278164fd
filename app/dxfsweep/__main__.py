"""Allow running dxfsweep as ``python -m dxfsweep``."""

from dxfsweep.cli.main import app

app(prog_name="dxfsweep")
