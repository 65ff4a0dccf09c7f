"""Radio Schedule Service: normalized week schedules for Radio 357 and Radio Nowy Świat."""

__version__ = "0.1.0"
