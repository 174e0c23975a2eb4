"""
Config Module
=============
Runtime settings for the shop inventory tool.
"""


class Config:
    """Configuration parameters for the inventory shell"""
    def __init__(self):
        # Validation policy (the store never enforced a floor on stock)
        self.allow_negative_price = False
        self.allow_negative_quantity = True

        # Soft reservation hint, exceeding it is allowed
        self.capacity_hint = 30

        # Display
        self.currency = "GBP"

        self.log_level = "WARNING"

    def __repr__(self):
        return (f"Config(allow_negative_price={self.allow_negative_price}, "
                f"allow_negative_quantity={self.allow_negative_quantity}, "
                f"capacity_hint={self.capacity_hint}, currency={self.currency!r}, "
                f"log_level={self.log_level!r})")


# Global config instance
config = Config()
