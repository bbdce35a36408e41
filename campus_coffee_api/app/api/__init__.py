"""
HTTP layer of the Campus Coffee API.

Routes are grouped by API version in subpackages such as ``v1``; each
version exposes a single ``router`` that the application mounts under
``/api/<version>``.
"""
