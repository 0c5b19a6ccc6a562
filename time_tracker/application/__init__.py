"""Application layer: use cases, DTOs, ports, and pure services.

Depends on the domain only; infrastructure implements the ports in
time_tracker.application.interfaces.
"""
