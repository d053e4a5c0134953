"""Unit tests for logging utilities.

This test suite validates logger setup and the structured log helpers.
"""

import unittest
import sys
import tempfile
import logging
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bagforest.tracking import (
    setup_logger,
    get_logger,
    log_phase_start,
    log_phase_end,
    log_member_trained,
    log_training_progress,
    log_error
)


class TestLoggerSetup(unittest.TestCase):
    """Test logger configuration."""
    
    def setUp(self):
        """Set up temporary directory."""
        self.temp_dir = tempfile.mkdtemp()
    
    def tearDown(self):
        """Detach handlers so files are released."""
        logger = logging.getLogger('bagforest_test')
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
    
    def test_console_only(self):
        """Test logger without a file has one handler."""
        logger = setup_logger('bagforest_test', level=logging.DEBUG)
        
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)
    
    def test_file_logging(self):
        """Test log records reach the log file."""
        log_file = Path(self.temp_dir) / 'nested' / 'forest.log'
        logger = setup_logger('bagforest_test', log_file=log_file)
        logger.info("hello forest")
        for handler in logger.handlers:
            handler.flush()
        
        self.assertTrue(log_file.exists())
        self.assertIn("INFO: hello forest", log_file.read_text())
    
    def test_repeated_setup_replaces_handlers(self):
        """Test calling setup twice does not duplicate output."""
        setup_logger('bagforest_test')
        logger = setup_logger('bagforest_test')
        
        self.assertEqual(len(logger.handlers), 1)


class TestGetLogger(unittest.TestCase):
    """Test logger resolution."""
    
    def test_default_logger(self):
        """Test the package logger is used by default."""
        self.assertEqual(get_logger().name, 'bagforest')
    
    def test_explicit_logger(self):
        """Test an explicit logger is returned unchanged."""
        logger = logging.getLogger('somewhere_else')
        self.assertIs(get_logger(logger), logger)


class TestLogHelpers(unittest.TestCase):
    """Test structured log messages."""
    
    def setUp(self):
        """Set up logger."""
        self.logger = logging.getLogger('bagforest.helpers')
    
    def test_phase_banners(self):
        """Test phase start and end banners."""
        with self.assertLogs(self.logger, level='INFO') as logs:
            log_phase_start(self.logger, "Building forest", "10 members")
            log_phase_end(self.logger, "Building forest", elapsed_time=1.3)
        
        output = "\n".join(logs.output)
        self.assertIn("BUILDING FOREST", output)
        self.assertIn("10 members", output)
        self.assertIn("BUILDING FOREST COMPLETE (1.3s)", output)
    
    def test_member_trained_is_debug(self):
        """Test per-member lines are DEBUG level."""
        with self.assertLogs(self.logger, level='DEBUG') as logs:
            log_member_trained(self.logger, 3, (1, 2, 3), ('a', 'b'))
        
        self.assertEqual(logs.records[0].levelno, logging.DEBUG)
        self.assertIn("Member 3: 3 samples, 2 attributes", logs.output[0])
    
    def test_training_progress(self):
        """Test progress percentage."""
        with self.assertLogs(self.logger, level='INFO') as logs:
            log_training_progress(self.logger, 3, 4)
        
        self.assertIn("3/4 (75.0%)", logs.output[0])
    
    def test_error_with_context(self):
        """Test errors are logged with their type and context."""
        with self.assertLogs(self.logger, level='ERROR') as logs:
            log_error(self.logger, RuntimeError("boom"), context="trainer for member 2")
        
        self.assertIn("Error in trainer for member 2: RuntimeError: boom", logs.output[0])


if __name__ == '__main__':
    unittest.main(verbosity=2)
