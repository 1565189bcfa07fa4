"""ksymtypes - compare the exported type surface of two symtypes builds."""

__version__ = "0.1.0"
