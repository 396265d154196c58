"""Services Layer — people commands, queries and the request pipeline they share.

Invariants:
    - One class per operation, each with an async execute(request)
    - Commands return Result; queries return raw values
"""
