from reportbook.models.base import DatabaseConnectionManager
from reportbook.models.user import User
from reportbook.models.report import Report

# creation order, owners first
models = [User, Report]

__all__ = ['DatabaseConnectionManager', 'User', 'Report', 'models']
