"""
Data‑access ports.

A port is the abstract boundary the services depend on.  Concrete
implementations live in ``data``; tests provide in‑memory fakes.
"""
