"""
City Info Backend — Application Package Initializer
=====================================================

Layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Mapping + Patch engine (DTOs)     │  ← entity ↔ wire conversion
    ├─────────────────────────────────────┤
    │   CityInfoRepository (Services)     │  ← queries, unit of work
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
