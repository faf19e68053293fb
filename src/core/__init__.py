"""
Core field extraction for exchange trade-feed messages.

Pattern registry, message classifier and the compact value types
(Timestamp, OrderId). Independent of the transport that delivers messages.
"""
