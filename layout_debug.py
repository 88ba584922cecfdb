#!/usr/bin/env python3
"""Debug script to trace layout resolution across widths"""

import sys
import logging
from dotenv import load_dotenv
from config import DesktopConfiguration
from gridcore.ui_logic import GridCoordinator, GridItem

load_dotenv()

# Enable debug logging
logging.basicConfig(level=logging.DEBUG, 
                   format='%(asctime)s %(name)s %(levelname)s: %(message)s')

DEFAULT_WIDTHS = [375, 640, 768, 1024, 1280, 1536]


def trace(width: float, coordinator: GridCoordinator) -> None:
    context = coordinator.measure(width)
    print(f"\n=== Width {width}px ===")
    for key, value in coordinator.get_state_summary().items():
        print(f"  {key}: {value}")
    for row, members in context.rows.as_dict().items():
        print(f"  row {row}:")
        for index in members:
            item = coordinator.children[index]
            print(f"    [{index}] {item.class_name!r} span={item.span} basis={item.flex_basis}")


def main():
    config = DesktopConfiguration()
    config.validate()

    widths = [float(arg) for arg in sys.argv[1:]] or DEFAULT_WIDTHS

    coordinator = GridCoordinator(
        config.demo_container_class,
        gaps=config.gaps,
        flow_direction=config.flow_direction,
        layout=config.create_layout(),
        children=[GridItem(name) for name in config.demo_item_classes],
    )

    print("=== Grid Layout Debug ===")
    print(f"Container: {config.demo_container_class!r}")
    print(f"Breakpoints: {config.breakpoint_scale.as_dict()}")

    for width in widths:
        trace(width, coordinator)

    coordinator.unmount()
    print("\nDebug complete")

if __name__ == "__main__":
    main()
