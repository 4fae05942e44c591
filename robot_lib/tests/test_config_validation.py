"""配置验证测试"""
import unittest

import pytest

from robot_lib.config import (
    DEFAULT_CONFIG,
    validate_config,
    ConfigValidationError,
    get_config_value,
    deep_update,
    merged_config,
)


def test_default_config_valid():
    """测试默认配置应该通过验证"""
    errors = validate_config(DEFAULT_CONFIG, raise_on_error=False)
    assert len(errors) == 0, f"Default config has errors: {errors}"


def test_validate_config_invalid_threshold():
    """测试无效的超时阈值"""
    config = merged_config(DEFAULT_CONFIG, {'periodic': {'overrun_threshold_ms': -1.0}})

    errors = validate_config(config, raise_on_error=False)
    assert len(errors) > 0
    assert any('overrun_threshold_ms' in key for key, _ in errors)


def test_validate_config_invalid_field_width():
    """测试无效的场地宽度"""
    config = merged_config(DEFAULT_CONFIG, {'field': {'width': 0.0}})

    errors = validate_config(config, raise_on_error=False)
    assert any('field.width' == key for key, _ in errors)


def test_validate_config_type_error():
    """测试类型错误检测"""
    config = merged_config(DEFAULT_CONFIG, {'periodic': {'report_interval_sec': 'often'}})

    errors = validate_config(config, raise_on_error=False)
    assert len(errors) > 0
    assert any('类型错误' in msg for _, msg in errors)


def test_validate_config_bool_switch():
    """测试布尔开关类型检查"""
    config = merged_config(DEFAULT_CONFIG, {'periodic': {'report_enabled': 1}})

    errors = validate_config(config, raise_on_error=False)
    assert any('report_enabled' in key for key, _ in errors)


def test_validate_config_layout_file_type():
    """测试布局文件路径类型检查"""
    config = merged_config(DEFAULT_CONFIG, {'field': {'layout_file': 42}})

    errors = validate_config(config, raise_on_error=False)
    assert any('layout_file' in key for key, _ in errors)


def test_validate_config_raise_on_error():
    """测试 raise_on_error 参数"""
    config = merged_config(DEFAULT_CONFIG, {'field': {'length': -5.0}})

    with pytest.raises(ConfigValidationError):
        validate_config(config, raise_on_error=True)


def test_validate_config_missing_sections_ok():
    """测试缺失的配置段不报错"""
    assert validate_config({}, raise_on_error=False) == []


def test_validate_config_not_dict():
    with pytest.raises(ConfigValidationError):
        validate_config(['periodic'])


def test_get_config_value_nested():
    """测试嵌套配置值获取"""
    value = get_config_value(DEFAULT_CONFIG, 'periodic.overrun_threshold_ms')
    assert value == 20.0


def test_get_config_value_default():
    """测试默认值获取"""
    value = get_config_value(DEFAULT_CONFIG, 'nonexistent.key', default=42)
    assert value == 42


def test_get_config_value_from_fallback():
    """测试从备选配置获取缺失值"""
    config = {'periodic': {'overrun_threshold_ms': 10.0}}
    value = get_config_value(config, 'periodic.report_interval_sec', fallback_config=DEFAULT_CONFIG)
    assert value == 10.0
    assert get_config_value(config, 'periodic.overrun_threshold_ms',
                            fallback_config=DEFAULT_CONFIG) == 10.0


class TestConfigMerge(unittest.TestCase):

    def test_deep_update_merges_nested(self):
        """Nested sections are merged instead of replaced."""
        source = {'periodic': {'overrun_threshold_ms': 20.0, 'report_enabled': True}}
        deep_update(source, {'periodic': {'overrun_threshold_ms': 15.0}})

        self.assertEqual(source['periodic']['overrun_threshold_ms'], 15.0)
        self.assertTrue(source['periodic']['report_enabled'])

    def test_merged_config_does_not_mutate_base(self):
        """merged_config works on a deep copy of the base."""
        config = merged_config(DEFAULT_CONFIG, {'field': {'length': 12.0}})

        self.assertEqual(config['field']['length'], 12.0)
        self.assertNotEqual(DEFAULT_CONFIG['field']['length'], 12.0)
