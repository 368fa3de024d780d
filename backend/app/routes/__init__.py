# Routes package init
"""
City Info Backend — API Routes Package
========================================

Route Inventory:
    - cities.py:             GET /api/v{version}/cities
                             GET /api/v{version}/cities/{id}
    - points_of_interest.py: GET/POST       /api/cities/{cityId}/pointsofinterest
                             GET/PUT/PATCH/DELETE
                                            /api/cities/{cityId}/pointsofinterest/{id}
    - health.py:             GET /health

Routes stay thin: parse the request, call the repository, map to DTOs,
pick the status code.
"""
