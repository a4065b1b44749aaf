"""
Domain Services - Serviços de lógica de negócio pura (sem conhecimento de APIs externas)

IMPORTANTE: Mappers de APIs externas → domain entities pertencem à infrastructure!
- infrastructure/adapters/output/providers/weatherapi/mappers/weatherapi_data_mapper.py
"""

from domain.services.condition_classifier import classify_condition
from domain.services.next_hours_selector import select_next_24_hours
from domain.services.temperature_unit_propagator import apply_temperature_unit

__all__ = [
    'classify_condition',
    'select_next_24_hours',
    'apply_temperature_unit'
]
