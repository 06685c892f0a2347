"""YAML loader for linear layout definitions."""

from pathlib import Path
from typing import Any

import numpy as np
import yaml

from ..core.node import ViewNode
from .axis import axis_for
from .linear import LinearLayout


# Layout parameters read from a definition, with their defaults
LAYOUT_PARAMETERS = {
    "leading_margin": 0.0,
    "leading_side_margin": 0.0,
    "trailing_side_margin": 0.0,
    "spacing": 0.0,
}


class LayoutLoader:
    """Loads linear layout definitions from YAML files.

    YAML format:
        name: toolbar
        axis: horizontal            # horizontal|vertical
        frame: [0, 0, 320, 44]      # optional [x, y, width, height]
        leading_margin: 8
        leading_side_margin: 4
        trailing_side_margin: 4
        spacing: 6
        members:
          - name: back
          - name: title
            size: 0.5               # fraction of the layout's size
            relative: true
          - name: done
            size: 60                # absolute size in points

    A member that declares its own axis is built as a nested layout and takes
    the same keys, including its own members.
    """

    def load(self, path: str | Path) -> LinearLayout:
        """Load a layout definition from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            The populated LinearLayout

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the definition is invalid
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Layout definition not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f)

        return self._build_layout(data)

    def load_string(self, yaml_string: str) -> LinearLayout:
        """Load a layout definition from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            The populated LinearLayout
        """
        data = yaml.safe_load(yaml_string)
        return self._build_layout(data)

    def _build_layout(self, data: Any, default_name: str = "layout") -> LinearLayout:
        """Build a layout (and nested layouts) from parsed YAML data."""
        if not isinstance(data, dict):
            raise ValueError("Layout definition must be a mapping")
        name = str(data.get("name", default_name))
        if "axis" not in data:
            raise ValueError(f"Layout '{name}' has no axis")

        parameters = {
            key: self._number(data.get(key, default), key, name)
            for key, default in LAYOUT_PARAMETERS.items()
        }
        frame = data.get("frame")
        if frame is not None:
            try:
                frame = np.array(frame, dtype=np.float64)
            except (TypeError, ValueError):
                frame = None
            if frame is None or frame.shape != (4,):
                raise ValueError(f"Frame must be [x, y, width, height], got {data['frame']}")

        layout = LinearLayout(
            axis_for(data["axis"]),
            name=name,
            frame=frame,
            **parameters,
        )

        members = data.get("members", [])
        if not isinstance(members, list):
            raise ValueError(f"Members of '{layout.name}' must be a list")

        for i, member_def in enumerate(members):
            member = self._build_member(member_def, f"{layout.name}_{i}")
            layout.add_member(member)

            size = member_def.get("size")
            if size is not None:
                relative = member_def.get("relative", False)
                if not isinstance(relative, bool):
                    raise ValueError(
                        f"'relative' of '{member.name}' must be true or false, got {relative!r}"
                    )
                layout.set_member_size(i, relative, self._number(size, "size", member.name))

        return layout

    def _build_member(self, member_def: Any, default_name: str) -> ViewNode:
        """Build a plain node or, when it declares an axis, a nested layout."""
        if not isinstance(member_def, dict):
            raise ValueError(f"Member definition must be a mapping, got {member_def!r}")

        if "axis" in member_def:
            return self._build_layout(member_def, default_name)

        name = member_def.get("name")
        if name is None:
            raise ValueError(f"Member {member_def!r} has no name")
        return ViewNode(str(name))

    def _number(self, value: Any, key: str, owner: str) -> float:
        """Convert a YAML scalar to a float, reporting the key on failure."""
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ValueError(f"'{key}' of '{owner}' must be a number, got {value!r}") from None
