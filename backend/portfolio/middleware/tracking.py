from flask import request

from portfolio.application.analytics import track_page_view
from portfolio.gateway import get_gateway


def client_ip():
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr


def tracking_middleware(app):
    @app.after_request
    def record_page_view(response):
        if request.method != "GET" or response.status_code != 200:
            return response

        view = app.view_functions.get(request.endpoint)
        if not getattr(view, "tracks_page_view", False):
            return response

        track_page_view(
            gateway=get_gateway(),
            path=request.path,
            user_agent=request.headers.get("User-Agent"),
            referrer=request.referrer,
            ip_address=client_ip(),
        )
        return response
