"""
pytest плагины журналирования результатов прогона (подключаются в conftest.py).
"""
