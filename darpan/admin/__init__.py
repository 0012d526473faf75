"""Session-scoped admin entities: widgets, filter settings, users, surveys, login."""
from .widgets import ChartWidget, WidgetBoard
from .settings import FilterSettings
from .users import User, UserDirectory
from .surveys import LastSurveyError, Question, Survey, SurveyCatalog
from .auth import SessionAuth, SessionUser
