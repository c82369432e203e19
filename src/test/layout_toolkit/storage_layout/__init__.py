"""
存储布局分析模块

提供Solidity风格存储槽位建模能力:
- 解析类型声明与类型宽度
- 计算frame内的槽位打包和继承链展平
- 计算mapping/数组的派生槽位
- 读取JSON schema / Solidity源码, 序列化布局
"""

from .models import (
    Field,
    Frame,
    FrameLayout,
    Layout,
    PlacedField,
    ScalarClass,
    SlotAddress,
    TypeDescriptor,
    TypeKind,
    make_frame,
)
from .type_resolver import TypeRegistry, TypeSizeResolver
from .layout_calculator import InheritanceLayoutBuilder, SlotAllocator, build_layout
from .address_resolver import ContainerAddressResolver, ResolvedLocation, resolve_address
from .schema_loader import (
    dump_layout,
    frames_from_schema,
    layout_from_dict,
    layout_to_dict,
    load_any_layout,
    load_frames,
    load_layout,
)
from .solidity_parser import SolidityParser

__all__ = [
    "Field",
    "Frame",
    "FrameLayout",
    "Layout",
    "PlacedField",
    "ScalarClass",
    "SlotAddress",
    "TypeDescriptor",
    "TypeKind",
    "make_frame",
    "TypeRegistry",
    "TypeSizeResolver",
    "InheritanceLayoutBuilder",
    "SlotAllocator",
    "build_layout",
    "ContainerAddressResolver",
    "ResolvedLocation",
    "resolve_address",
    "dump_layout",
    "frames_from_schema",
    "layout_from_dict",
    "layout_to_dict",
    "load_any_layout",
    "load_frames",
    "load_layout",
    "SolidityParser",
]
