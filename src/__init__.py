"""
Credit Application System - Credit Management Service

A FastAPI-based microservice where customers register and apply for
credit, with installment and first-installment date rules enforced
before anything is persisted.
"""

__version__ = "0.1.0"
