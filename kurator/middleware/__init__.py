"""
Kurator Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Preflight] → [CORS] → [Access Log] → [GZip] → Route Handler

    - Request ID tags the request, every log line it produces and every
      response, including OPTIONS answers and 500s.
    - Preflight answers every OPTIONS request with an empty 200, keeping the
      CORS headers CORSMiddleware computed for browser preflights.
    - CORS decorates all other responses with CORS headers.
    - Access Log records method, path, status and duration, and turns
      unexpected exceptions into the 500 envelope.

    Why this order: every response, errors included, passes CORS and
    Request ID on the way out, so a cross-origin frontend can always read
    the envelope and report its request ID.
"""
