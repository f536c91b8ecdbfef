"""
AWS resource and data-source adapters.

This package translates a flat, typed attribute schema into AWS control-plane
calls and back again:
- OpsWorks layers, one adapter per layer kind, sharing a generic attribute bag
- EC2 IPAM pool lookup as a read-only data source
"""
