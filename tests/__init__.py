"""
Test suite for the feedlot backend.

Test Organization:
- conftest.py - shared fixtures (users, clients, pens, animals, foods)
- integration/ - service and API integration tests, one module per area
"""
