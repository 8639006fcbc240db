"""
Domain layer - Pure pricing logic without infrastructure dependencies.

This package contains the basket, product and delivery models, the money
helpers and the discount offers.
"""
