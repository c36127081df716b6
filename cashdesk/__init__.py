"""A console cash register: a CSV product catalogue, receipts, cashier shifts and a script or menu front end."""

__version__ = "0.1.0"
__all__ = ["app", "products", "receipt", "shift"]