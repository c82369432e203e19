#!/usr/bin/env python3
"""
Layout Toolkit 演示脚本

展示核心功能:
1. 存储布局计算 (打包 + 继承 + gap)
2. mapping / 数组派生槽位
3. 升级兼容性检查

运行方式:
    python demo_layout_toolkit.py
"""

import sys
import logging
from pathlib import Path

# 添加src/test到路径
sys.path.insert(0, str(Path(__file__).parent / "src" / "test"))

from layout_toolkit import build_layout, compare, resolve_address
from layout_toolkit.storage_layout import frames_from_schema
from layout_toolkit.upgrade_analysis import render_layout_table

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

V1_SCHEMA = {
    "structs": {
        "User": [
            {"name": "name", "type": "string"},
            {"name": "age", "type": "uint256"},
            {"name": "active", "type": "bool"},
        ],
        "Item": [
            {"name": "id", "type": "uint256"},
            {"name": "price", "type": "uint128"},
        ],
    },
    "frames": [
        {"name": "Ownable", "gap": 49, "fields": [
            {"name": "owner", "type": "address"},
            {"name": "paused", "type": "bool"},
        ]},
        {"name": "Registry", "fields": [
            {"name": "users", "type": "mapping(uint256 => User)"},
            {"name": "items", "type": "Item[]"},
            {"name": "total", "type": "uint64"},
        ]},
    ],
}


def _v2_schema(extra_user_members, extra_item_members, ownable_fields, gap):
    return {
        "structs": {
            "User": V1_SCHEMA["structs"]["User"] + extra_user_members,
            "Item": V1_SCHEMA["structs"]["Item"] + extra_item_members,
        },
        "frames": [
            {"name": "Ownable", "gap": gap, "fields": V1_SCHEMA["frames"][0]["fields"] + ownable_fields},
            V1_SCHEMA["frames"][1],
        ],
    }


def demo_layout():
    """演示1: 存储布局计算"""
    print("\n" + "="*80)
    print("演示1: 存储布局计算")
    print("="*80)

    layout = build_layout(frames_from_schema(V1_SCHEMA))
    print()
    print(render_layout_table(layout))
    return layout


def demo_addresses(layout):
    """演示2: 派生槽位"""
    print("\n" + "="*80)
    print("演示2: mapping / 数组派生槽位")
    print("="*80)

    for path, keys in [
        ("users[42].name", ()),
        ("users[].active", (42,)),
        ("items[0].id", ()),
        ("items[3].price", ()),
    ]:
        slot = resolve_address(layout, path, keys)
        print(f"  {path:<20} keys={list(keys)!s:<6} -> {hex(slot)}")


def demo_upgrade_checks(v1):
    """演示3: 升级兼容性检查"""
    print("\n" + "="*80)
    print("演示3: 升级兼容性检查")
    print("="*80)

    cases = [
        ("User 尾部追加 email/score", _v2_schema(
            [{"name": "email", "type": "string"}, {"name": "score", "type": "uint256"}], [], [], 49)),
        ("Ownable 使用gap追加 admin", _v2_schema(
            [], [], [{"name": "admin", "type": "address"}], 48)),
        ("Ownable 追加字段但gap未减少", _v2_schema(
            [], [], [{"name": "admin", "type": "address"}], 49)),
        ("Item 追加成员 (数组元素)", _v2_schema(
            [], [{"name": "seller", "type": "address"}], [], 49)),
    ]

    for title, schema in cases:
        report = compare(v1, build_layout(frames_from_schema(schema)))
        icon = "✅" if report.is_safe else "❌"
        print(f"\n{icon} {title}: {report.verdict.value}")
        for d in report.diagnostics:
            drift = "" if d.drift is None else f" (drift {d.drift:+d})"
            print(f"   - {d.kind.value} {d.frame_name}.{d.field_name}{drift}: {d.detail}")


def main():
    """主函数"""
    print("\n" + "="*80)
    print(" Layout Toolkit 演示程序")
    print("="*80)

    try:
        v1 = demo_layout()
        demo_addresses(v1)
        demo_upgrade_checks(v1)

        print("\n" + "="*80)
        print("✅ 演示完成!")
        print("="*80)

    except Exception as e:
        logger.error(f"演示过程中出错: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
