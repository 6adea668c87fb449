"""
Real HTTP integration clients.

These clients communicate with real external systems via HTTP:
- DummyJSON product catalogue API

Important:
- Must return data shaped according to src/integrations/contracts/*
- Must raise only the classified errors from src/integrations/errors.py

Wiring:
The client instance used by the API is built in src/api/main.py only.
"""
