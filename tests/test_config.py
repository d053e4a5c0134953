"""Unit tests for forest configuration.

This test suite validates that ForestConfig produces correct defaults and
rejects invalid values.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bagforest.config import (
    ForestConfig, SamplingConfig, ParallelConfig, TrackingConfig
)


class TestBasicInstantiation(unittest.TestCase):
    """Test basic configuration instantiation."""
    
    def test_default_instantiation(self):
        """Test that config can be instantiated with defaults."""
        config = ForestConfig()
        config.validate()
        self.assertIsNotNone(config)
    
    def test_random_state(self):
        """Test default random state."""
        config = ForestConfig()
        self.assertEqual(config.random_state, 315)


class TestConfigurationValues(unittest.TestCase):
    """Test default configuration values."""
    
    def setUp(self):
        """Set up test config."""
        self.config = ForestConfig()
    
    def test_forest_size(self):
        """Test default member count."""
        self.assertEqual(self.config.n_members, 10)
    
    def test_sampling_config(self):
        """Test sampling defaults."""
        self.assertEqual(self.config.sampling.n_samples_per_member, 100)
        self.assertIsNone(self.config.sampling.n_attrs_per_member)
        self.assertTrue(self.config.sampling.carry_forward)
    
    def test_parallel_config(self):
        """Test parallel execution defaults."""
        self.assertEqual(self.config.parallel.n_workers, 1)
        self.assertEqual(self.config.parallel.classify_workers, 1)
    
    def test_tracking_config(self):
        """Test tracking defaults."""
        self.assertEqual(self.config.tracking.log_level, 'INFO')
        self.assertIsNone(self.config.tracking.log_file)
        self.assertEqual(self.config.tracking.log_every, 10)


class TestValidation(unittest.TestCase):
    """Test configuration validation."""
    
    def test_negative_members(self):
        """Test negative member count is rejected."""
        with self.assertRaises(AssertionError):
            ForestConfig(n_members=-1).validate()
    
    def test_zero_members_allowed(self):
        """Test an empty forest is a valid configuration."""
        ForestConfig(n_members=0).validate()
    
    def test_negative_sample_count(self):
        """Test negative samples per member is rejected."""
        with self.assertRaises(AssertionError):
            SamplingConfig(n_samples_per_member=-5).validate()
    
    def test_negative_attr_count(self):
        """Test negative attributes per member is rejected."""
        with self.assertRaises(AssertionError):
            SamplingConfig(n_attrs_per_member=-1).validate()
    
    def test_zero_workers(self):
        """Test zero workers is rejected."""
        with self.assertRaises(AssertionError):
            ParallelConfig(n_workers=0).validate()
        with self.assertRaises(AssertionError):
            ParallelConfig(classify_workers=0).validate()
    
    def test_invalid_log_level(self):
        """Test unknown log level is rejected."""
        with self.assertRaises(AssertionError):
            TrackingConfig(log_level='VERBOSE').validate()
    
    def test_nested_validation(self):
        """Test root validation reaches nested configs."""
        config = ForestConfig(parallel=ParallelConfig(n_workers=0))
        with self.assertRaises(AssertionError):
            config.validate()


class TestCustomization(unittest.TestCase):
    """Test custom configuration."""
    
    def test_custom_sampling(self):
        """Test custom sampling values are kept."""
        config = ForestConfig(
            n_members=50,
            sampling=SamplingConfig(n_samples_per_member=200, n_attrs_per_member=4, carry_forward=False)
        )
        config.validate()
        
        self.assertEqual(config.n_members, 50)
        self.assertEqual(config.sampling.n_attrs_per_member, 4)
        self.assertFalse(config.sampling.carry_forward)
    
    def test_log_file_converted_to_path(self):
        """Test string log file paths become Path objects."""
        config = TrackingConfig(log_file='logs/forest.log')
        
        self.assertIsInstance(config.log_file, Path)
        self.assertEqual(config.log_file, Path('logs/forest.log'))


class TestSummary(unittest.TestCase):
    """Test summary generation."""
    
    def test_summary_content(self):
        """Test summary mentions key parameters."""
        summary = ForestConfig(n_members=12).summary()
        
        self.assertIn("Forest Configuration Summary", summary)
        self.assertIn("Members: 12", summary)
        self.assertIn("Attributes per member: sqrt(pool)", summary)
        self.assertIn("Carry forward: True", summary)
    
    def test_summary_explicit_attrs(self):
        """Test summary shows an explicit attribute count."""
        config = ForestConfig(sampling=SamplingConfig(n_attrs_per_member=5))
        
        self.assertIn("Attributes per member: 5", config.summary())


if __name__ == '__main__':
    unittest.main(verbosity=2)
