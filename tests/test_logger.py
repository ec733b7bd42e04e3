#!/usr/bin/env python3
"""Test suite for logging setup"""

import logging
import os
import tempfile
import unittest

from pvtcore.logger import (
    LogContext,
    LogLevel,
    get_logger,
    setup_logger,
    setup_logger_from_config,
)


class TestLogger(unittest.TestCase):
    """Test logger configuration"""

    def tearDown(self):
        for name in ('pvtcore', 'pvtcore.test'):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
            logger.setLevel(logging.NOTSET)

    def test_trace_level(self):
        """TRACE sits below DEBUG and is available on every logger"""
        self.assertLess(LogLevel.TRACE.value, logging.DEBUG)
        self.assertEqual(logging.getLevelName(LogLevel.TRACE.value), 'TRACE')
        logger = get_logger('pvtcore.test')
        self.assertTrue(hasattr(logger, 'trace'))

    def test_trace_emitted(self):
        """trace() records go through when the level allows it"""
        logger = get_logger('pvtcore.test')
        with self.assertLogs('pvtcore.test', level=LogLevel.TRACE.value) as logs:
            logger.trace("zwd: %s", 0.1)
        self.assertIn("zwd: 0.1", logs.output[0])

    def test_setup_logger(self):
        """Handlers are replaced, not stacked"""
        logger = setup_logger('pvtcore.test', 'DEBUG')
        setup_logger('pvtcore.test', 'DEBUG')
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_unknown_level(self):
        """Unknown level names raise"""
        with self.assertRaises(ValueError):
            setup_logger('pvtcore.test', 'VERBOSE')

    def test_file_output(self):
        """File handler writes plain records"""
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'pvt.log')
            logger = setup_logger('pvtcore.test', 'INFO', log_file=path, console=False)
            logger.info("epoch resolved")
            for handler in logger.handlers:
                handler.flush()
            with open(path) as f:
                content = f.read()
            self.tearDown()
        self.assertIn("epoch resolved", content)
        self.assertNotIn('\033[', content)

    def test_log_context(self):
        """Level is restored on exit"""
        logger = get_logger('pvtcore.test')
        logger.setLevel(logging.WARNING)
        with LogContext(logger, 'TRACE'):
            self.assertEqual(logger.level, LogLevel.TRACE.value)
        self.assertEqual(logger.level, logging.WARNING)

    def test_from_config(self):
        """Per module levels from a dictionary"""
        setup_logger_from_config({
            'default_level': 'WARNING',
            'console': False,
            'module_levels': {'pvtcore.test': 'TRACE'},
        })
        self.assertEqual(logging.getLogger('pvtcore').level, logging.WARNING)
        self.assertEqual(logging.getLogger('pvtcore.test').level, LogLevel.TRACE.value)


if __name__ == '__main__':
    unittest.main()
