"""Crime report notification service.

The package groups the domain entities, persistence layer, realtime
notification delivery and the HTTP/websocket interfaces of the service.
"""
