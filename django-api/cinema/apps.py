from django.apps import AppConfig
from django.conf import settings


class CinemaConfig(AppConfig):
    name = "cinema"
    verbose_name = "Cinema"

    def ready(self) -> None:
        from cinema.services.context import CinemaContext

        self.context = CinemaContext.create(getattr(settings, "CINEMA_ROOM_SEATS", None))
