"""dxfsweep - retention cleanup for intermediate DXF files on the job share."""

__version__ = "0.1.0"
