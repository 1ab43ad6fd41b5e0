"""Exceptions raised by the dessert clicker model."""


class DessertClickerError(Exception):
    """Base class for all game errors."""


class InvalidCatalog(DessertClickerError, ValueError):
    """The dessert catalog is empty, unsorted or contains a malformed tier."""


class SharingUnavailable(DessertClickerError):
    """No external sharing mechanism could be invoked."""
