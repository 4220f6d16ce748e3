"""Use cases: documentation (reconciliation, aggregation), employees, document types, documents."""
