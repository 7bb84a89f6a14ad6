"""Adaptadores de I/O (httpx).

- `transport`: núcleo compartido (peticiones, ejecución, sobre de respuesta).
- `auth`, `payload`, `http_client`: piezas del núcleo.
- `jira`, `agile`, `sm`, `confluence`: clientes de producto y sus servicios.
"""
