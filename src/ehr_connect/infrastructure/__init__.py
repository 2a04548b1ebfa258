"""Infrastructure: httpx transport, session cache, backend strategies.

Factories are imported from ``ehr_connect.infrastructure.factories``.
"""
