from django.apps import AppConfig


class TrucklogConfig(AppConfig):
    name = 'trucklog'
    verbose_name = 'TruckLog Pro'

    def ready(self):
        from .session import SessionRegistry
        self.sessions = SessionRegistry()
