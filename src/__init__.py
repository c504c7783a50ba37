"""
STK Relay - M-Pesa STK Push Gateway Relay

A FastAPI-based service that forwards STK Push payment requests to the
Daraja API and acknowledges asynchronous payment-status callbacks.
"""

__version__ = "0.1.0"
