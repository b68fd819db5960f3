"""ID 位布局测试用例"""

import unittest
from datetime import datetime, timezone

from anytool.core.constants import (
    DATACENTER_ID_SHIFT,
    DEFAULT_EPOCH,
    MAX_DATACENTER_ID,
    MAX_WORKER_ID,
    SEQUENCE_MASK,
    TIMESTAMP_LEFT_SHIFT,
    WORKER_ID_SHIFT,
)
from anytool.core.errors import InvalidSnowflakeIdError
from anytool.core.idgen import (
    SnowflakeId,
    compose_id,
    datacenter_id_of,
    decode_id,
    expiry_datetime,
    expiry_timestamp,
    sequence_of,
    timestamp_of,
    worker_id_of,
)


class TestLayoutConstants(unittest.TestCase):
    """位布局常量测试"""

    def test_geometry(self):
        self.assertEqual(SEQUENCE_MASK, 0xFFF)
        self.assertEqual(MAX_WORKER_ID, 0x1F)
        self.assertEqual(MAX_DATACENTER_ID, 0x1F)
        self.assertEqual(WORKER_ID_SHIFT, 12)
        self.assertEqual(DATACENTER_ID_SHIFT, 17)
        self.assertEqual(TIMESTAMP_LEFT_SHIFT, 22)


class TestComposeAndDecode(unittest.TestCase):
    """编码解码测试"""

    def test_compose_places_fields(self):
        """测试各字段落在对应位上"""
        self.assertEqual(compose_id(1, 0, 0, 0), 1 << 22)
        self.assertEqual(compose_id(0, 1, 0, 0), 1 << 17)
        self.assertEqual(compose_id(0, 0, 1, 0), 1 << 12)
        self.assertEqual(compose_id(0, 0, 0, 1), 1)
        self.assertEqual(compose_id(1_000_000, 0, 0, 3), 4_194_304_000_003)

    def test_maximum_fields_keep_sign_bit_clear(self):
        """测试所有字段取最大值时符号位仍为 0"""
        snowflake_id = compose_id((1 << 41) - 1, 31, 31, 4095)
        self.assertEqual(snowflake_id, (1 << 63) - 1)
        self.assertEqual(snowflake_id >> 63, 0)

    def test_decode(self):
        """测试解析各字段"""
        snowflake_id = compose_id(123_456_789, 17, 5, 4000)

        decoded = decode_id(snowflake_id, epoch=1000)

        self.assertEqual(
            decoded,
            SnowflakeId(
                timestamp_delta=123_456_789,
                datacenter_id=17,
                worker_id=5,
                sequence=4000,
                epoch=1000,
            ),
        )
        self.assertEqual(decoded.timestamp, 123_457_789)
        self.assertEqual(decoded.to_id(), snowflake_id)

    def test_decode_default_epoch(self):
        """测试默认纪元下解析绝对时间"""
        now = 1_700_000_000_000
        snowflake_id = compose_id(now - DEFAULT_EPOCH, 1, 2, 3)

        decoded = decode_id(snowflake_id)

        self.assertEqual(decoded.timestamp, now)
        self.assertEqual(
            decoded.created_at,
            datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc),
        )

    def test_field_extractors(self):
        """测试单字段提取"""
        snowflake_id = compose_id(42, 3, 29, 7)

        self.assertEqual(worker_id_of(snowflake_id), 29)
        self.assertEqual(datacenter_id_of(snowflake_id), 3)
        self.assertEqual(sequence_of(snowflake_id), 7)
        self.assertEqual(timestamp_of(snowflake_id, epoch=0), 42)
        self.assertEqual(timestamp_of(snowflake_id), 42 + DEFAULT_EPOCH)

    def test_decode_rejects_invalid_ids(self):
        """测试拒绝负数、超出 63 位和非整数"""
        for bad in (-1, 1 << 63, 1 << 64, "123", 1.5, True):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidSnowflakeIdError):
                    decode_id(bad)

    def test_invalid_id_is_value_error(self):
        with self.assertRaises(ValueError):
            decode_id(-42)


class TestExpiry(unittest.TestCase):
    """41 位时间戳上限测试"""

    def test_expiry_timestamp(self):
        self.assertEqual(expiry_timestamp(0), (1 << 41) - 1)
        self.assertEqual(expiry_timestamp(), DEFAULT_EPOCH + (1 << 41) - 1)

    def test_expiry_datetime(self):
        """测试默认纪元约在 2039 年到期，纪元 0 约可用 69 年"""
        self.assertEqual(expiry_datetime().year, 2039)
        self.assertEqual(expiry_datetime(0).year, 2039)
        self.assertEqual(expiry_datetime(1_288_834_974_657).year, 2080)


if __name__ == "__main__":
    unittest.main()
