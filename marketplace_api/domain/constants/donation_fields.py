"""Constants for Donation model field names"""


class DonationFields:
    """Field name constants for Donation documents"""
    DONOR = "donor"
    RECEIVER = "receiver"
    PRODUCT = "product"
    STATUS = "status"
    
    # MongoDB specific
    MONGO_ID = "_id"
