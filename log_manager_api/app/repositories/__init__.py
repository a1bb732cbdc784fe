"""
Persistence gateways.

One repository per table.  Repositories receive the request's
connection and issue plain SQL; they hold no business rules.
"""
