"""
Domain Constants - Todas as constantes da aplicação centralizadas
Tabelas de condição climática, configuração de API e de armazenamento
"""
import os


class API:
    """Constantes de APIs externas"""

    # WeatherAPI.com
    WEATHERAPI_BASE_URL = os.environ.get('WEATHERAPI_BASE_URL', 'http://api.weatherapi.com')
    WEATHERAPI_KEY = os.environ.get('WEATHERAPI_KEY', '')
    FORECAST_PATH = "/v1/forecast.json"
    FORECAST_DAYS = int(os.environ.get('WEATHERAPI_FORECAST_DAYS', '7'))

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = 10  # segundos
    HTTP_TIMEOUT_CONNECT = 3  # segundos
    HTTP_TIMEOUT_READ = 7  # segundos
    HTTP_CONNECTION_LIMIT = 10
    HTTP_RETRY_ATTEMPTS = 3


class Storage:
    """Constantes de persistência (DynamoDB)"""

    FORECAST_TABLE_NAME = os.environ.get('FORECAST_TABLE_NAME', 'weather-forecast-store')
    PREFERENCES_TABLE_NAME = os.environ.get('PREFERENCES_TABLE_NAME', 'weather-preferences')

    # Apenas uma previsão armazenada por vez (slot constante)
    FORECAST_SLOT_ID = "0"


class Preferences:
    """Chaves e valores padrão das preferências do usuário"""

    TEMPERATURE_UNIT = "TEMPERATURE_UNIT"
    LAST_LOCATION = "LAST_LOCATION"

    DEFAULT_TEMPERATURE_UNIT = os.environ.get('DEFAULT_TEMPERATURE_UNIT', 'CELSIUS')
    DEFAULT_LAST_LOCATION = "0,0"


class WeatherCondition:
    """
    Tabela de condições do WeatherAPI.com

    ICON_CODES é avaliada em ordem: o primeiro conjunto que contém o código vence.
    DESCRIPTIONS traz o texto legível de cada código (sempre a versão diurna).
    """

    UNKNOWN_DESC = "Unknown"
    NO_ICON = ""

    ICON_CODES = (
        (frozenset({1000}), "clear"),
        (frozenset({1003}), "partly_cloudy"),
        (frozenset({1006}), "cloudy"),
        (frozenset({1009}), "overcast"),
        (frozenset({1030, 1135, 1147}), "mist"),
        (frozenset({1066, 1069, 1072, 1114, 1117, 1213, 1219, 1222, 1225, 1237, 1278}), "snow"),
        (frozenset({1063, 1186, 1189, 1195, 1198, 1201, 1204, 1207, 1243, 1246, 1255}), "rain"),
        (frozenset({1150, 1153, 1168, 1180, 1183, 1240, 1249, 1252, 1258, 1261, 1264}), "shower_rain"),
        (frozenset({1087, 1273, 1276, 1279, 1282}), "thunderstorm"),
    )

    DESCRIPTIONS = {
        1000: "Sunny",
        1003: "Partly cloudy",
        1006: "Cloudy",
        1009: "Overcast",
        1030: "Mist",
        1063: "Patchy rain possible",
        1066: "Patchy snow possible",
        1069: "Patchy sleet possible",
        1072: "Patchy freezing drizzle possible",
        1087: "Thundery outbreaks possible",
        1114: "Blowing snow",
        1117: "Blizzard",
        1135: "Fog",
        1147: "Freezing fog",
        1150: "Patchy light drizzle",
        1153: "Light drizzle",
        1168: "Freezing drizzle",
        1171: "Heavy freezing drizzle",
        1180: "Patchy light rain",
        1183: "Light rain",
        1186: "Moderate rain at times",
        1189: "Moderate rain",
        1192: "Heavy rain at times",
        1195: "Heavy rain",
        1198: "Light freezing rain",
        1201: "Moderate or heavy freezing rain",
        1204: "Light sleet",
        1207: "Moderate or heavy sleet",
        1210: "Patchy light snow",
        1213: "Light snow",
        1216: "Patchy moderate snow",
        1219: "Moderate snow",
        1222: "Patchy heavy snow",
        1225: "Heavy snow",
        1237: "Ice pellets",
        1240: "Light rain shower",
        1243: "Moderate or heavy rain shower",
        1246: "Torrential rain shower",
        1249: "Light sleet showers",
        1252: "Moderate or heavy sleet showers",
        1255: "Light snow showers",
        1258: "Moderate or heavy snow showers",
        1261: "Light showers of ice pellets",
        1264: "Moderate or heavy showers of ice pellets",
        1273: "Patchy light rain with thunder",
        1276: "Moderate or heavy rain with thunder",
        1279: "Patchy light snow with thunder",
        1282: "Moderate or heavy snow with thunder",
    }


class App:
    """Constantes da aplicação"""

    # Previsões
    MIN_FORECAST_DAYS = 2  # hoje + amanhã (janela das próximas 24h)
    NEXT_HOURS_WINDOW = 24

    # Placeholder exibido antes da primeira previsão
    EMPTY_TEXT = "-"
    EMPTY_HUMIDITY = 50
