# Routes package init
"""
MemoBoard Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - board.py:   /api/board/info, /posts, /search, /detail/{seq},
                  /write, /update/{seq}, /delete/{seq}
    - memos.py:   /api/memos, /api/memos/search, /api/memos/stats,
                  /api/memos/{fid}
    - health.py:  GET /health

Routes are thin: extract parameters, call the service, return its result.
Error status codes come from the global exception handlers in main.py.
"""
