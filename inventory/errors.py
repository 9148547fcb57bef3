NOT_FOUND_MESSAGE = "This product doesn't exist!"


class ProductNotFoundError(Exception):
    """Raised when an operation references a product id that is not in the collection."""

    def __init__(self, product_id: str, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message)
        self.product_id = product_id
        self.message = message
