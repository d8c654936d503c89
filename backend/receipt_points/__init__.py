"""Top-level application package for the receipt points API.

This package contains everything required to run the FastAPI backend
that scores purchase receipts: Pydantic schemas, the scoring rule
engine, the in-memory receipt store and the API routers.

To run the API locally you can execute:

```bash
uvicorn receipt_points.api.main:app --port 8080 --reload
```

or simply ``receipt-points`` once the project is installed. This will
serve the application on http://localhost:8080. You can override
configuration values using environment variables or a ``.env`` file at
the project root.
"""

__all__: list[str] = []
