"""HTTP middleware: request ID.

Applied in main app. Import and use from doctrack.main.
"""

from doctrack.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
