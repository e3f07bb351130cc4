from app.core.exceptions import AlreadyExistsError, ReferenceNotFoundError


class PurchaseOrderAlreadyExists(AlreadyExistsError):
    default_message = "Purchase order already exists"


class BuyerNotExists(ReferenceNotFoundError):
    default_message = "Buyer id not found"


class ProductRecordNotExists(ReferenceNotFoundError):
    default_message = "Product record id not found"
