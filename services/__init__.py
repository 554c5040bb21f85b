"""
Тестовый набор REST API brands / categories / upload / admin.
"""
