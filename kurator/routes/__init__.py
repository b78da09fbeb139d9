"""
Kurator Backend — API Routes Package
======================================

Route Inventory:
    - root.py:   GET  /                (plain-text liveness answer)
    - words.py:  GET  /corpus          (all words)
                 POST /word/add        (insert a word)
                 POST /word/delete     (delete a word by key)
                 GET  /word/get/{word} (one word by key)

Routes are THIN: each one parses the request, makes exactly one WordStore
call and wraps the result in the response envelope. Failures are raised,
never formatted here; the handlers in main.py build every error response.
"""
