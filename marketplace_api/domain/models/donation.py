class DonationStatus:
    """Known donation lifecycle states"""
    PENDING = "pending"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
