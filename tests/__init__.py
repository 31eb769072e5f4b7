# Tests package
"""
Unit and integration tests for MyCosmo.

Test categories:
- test_nasa.py / test_news_client.py: Content providers against stub transports
- test_solar_system.py: Static catalog
- test_coordinators.py: View-state transitions and load ordering
- test_observations.py / test_validation.py / test_preferences.py: Local store
- test_api.py / test_main.py: HTTP surface
"""
