# api/dependencies.py
from fastapi import Request
from ufc_scraper.cache import EventCache
from ufc_scraper.config import Config
from ufc_scraper.event_service import EventService


def create_event_service(config: Config) -> EventService:
    return EventService(config, EventCache(config))


def get_event_service(request: Request) -> EventService:
    return request.app.state.event_service
