"""
Tests for settings validation.

WHAT: Test display timezone and sort order settings
WHY: Bad configuration should fail at load time, not mid-render
HOW: Construct Settings directly with explicit values
"""

import pytest
from pydantic import ValidationError
from chat_threads.core.config import Settings


@pytest.mark.unit
class TestSettings:
    """Test Settings validation."""
    
    def test_defaults(self):
        config = Settings(_env_file=None)
        
        assert config.DEFAULT_SORT_ORDER == "asc"
        assert config.LOG_FILE is None
    
    def test_valid_timezone(self):
        config = Settings(_env_file=None, DISPLAY_TIMEZONE="Europe/Berlin")
        
        assert config.get_display_tz().key == "Europe/Berlin"
    
    def test_blank_timezone_means_local(self):
        config = Settings(_env_file=None, DISPLAY_TIMEZONE="")
        
        assert config.DISPLAY_TIMEZONE is None
        assert config.get_display_tz() is None
    
    def test_unknown_timezone_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DISPLAY_TIMEZONE="Mars/Olympus_Mons")
    
    def test_unknown_sort_order_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DEFAULT_SORT_ORDER="random")
    
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("CHAT_THREADS_DEFAULT_SORT_ORDER", "desc")
        
        assert Settings(_env_file=None).DEFAULT_SORT_ORDER == "desc"
