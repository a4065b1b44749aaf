"""
Use Case: Update User Location
"""
from application.ports.output.preferences_repository_port import IPreferencesRepository
from domain.value_objects.user_location import UserLocation


class UpdateUserLocationUseCase:
    """Use case: remember the last known location for the next forecast update"""

    def __init__(self, preferences_repository: IPreferencesRepository):
        self.preferences_repository = preferences_repository

    def execute(self, location: UserLocation) -> bool:
        return self.preferences_repository.save_location(location)
