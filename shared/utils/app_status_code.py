from enum import Enum


class AppStatusCode(str, Enum):
    DATA_RETRIEVED_SUCCESSFULLY = "100"
    OPERATION_SUCCESSFUL = "101"

    INVALID_INPUT = "200"
    OPERATION_FAILED = "201"
    OPERATION_ERROR = "202"

    # Request registration
    QUANTITY_EXCEEDS_REMAINING = "300"
    QUANTITY_NOT_POSITIVE = "301"
    REQUEST_ITEM_NOT_FOUND = "302"
    REQUEST_ITEM_REJECTED = "303"

    # Lookups
    RESOURCE_NOT_FOUND = "400"

    def __str__(self):
        return self.value
