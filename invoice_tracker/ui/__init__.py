"""
Dash UI for the invoice tracker.

Modules:
- client: httpx client for the invoice API
- state: view state and the page's actions
- components / layout: Dash component builders
- labels: English and Arabic display text
- app: Dash application factory and callbacks
"""
