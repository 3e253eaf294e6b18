"""intervue-coder — provider-aware configuration manager for the Intervue Coder assistant."""

__version__ = '0.1.0'
