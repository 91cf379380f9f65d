"""
High-level use cases for the campus booking API.

Each service orchestrates the document store to implement the business rules
(register, log in, book, cancel, generic CRUD). Routers call these services
instead of loading or saving the document directly.
"""
