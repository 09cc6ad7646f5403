"""
pytest test suite for the order-shipping core.

Test categories:
- Unit tests: order state machine, shipping policies, validators, settings
- Integration tests: the main.py walkthrough end to end
"""
