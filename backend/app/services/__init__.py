# Services package init
"""
MemoBoard Backend — Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
How:   Services accept request schemas and a session, apply business rules,
       and return response schemas or envelope dicts.

Building blocks (shared by both resources):
    - RowMapper:        raw row → canonical record
    - PaginatedQuery:   offset pagination, keyword search, lookup by id
    - UpsertResolver:   insert-or-update by optional identifier, delete
    - envelope:         list/search and write response shapes

Resource services:
    - BoardService: category info, posts list/search/detail/write/update/delete
    - MemoService:  memos list/search/detail/save/delete/stats
"""
