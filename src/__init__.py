"""Easy Read Pager Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Accessible one-item-per-page field formatters with a serverless settings API"
)

__all__ = ["core", "formatters", "handlers"]
