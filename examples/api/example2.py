"""In this example, we write a custom mesh writer and pass it to the export"""

from typing import Mapping, Sequence
from numpy import ndarray, sin

from nodalvtk import Exporter, brick_grid
from nodalvtk.io import make_writer

# Protocols you can use for type annotations
from nodalvtk import protocols


class SummaryWriter:
    """Exemplary writer that prints the payload instead of writing a file"""

    def write_raw(self,
                  prefix: str,
                  coordinates: Sequence[ndarray],
                  fields: Mapping[str, ndarray],
                  real_elements: ndarray) -> str:
        return self._summarize("raw", prefix, coordinates, fields, real_elements)

    def write_high_order(self,
                         prefix: str,
                         coordinates: Sequence[ndarray],
                         fields: Mapping[str, ndarray],
                         real_elements: ndarray) -> str:
        return self._summarize("high-order", prefix, coordinates, fields, real_elements)

    def _summarize(self, mode, prefix, coordinates, fields, real_elements) -> str:
        print(f"{prefix} ({mode}): tensors of shape {coordinates[0].shape} for elements {list(real_elements)}")
        for name, values in fields.items():
            print(f" -- {name}: min = {values.min():.3f}, max = {values.max():.3f}")
        return prefix


if __name__ == "__main__":
    grid = brick_grid(order=3, elements_per_axis=(2, 2, 2))
    x = grid.geometry[:, grid.coordinate_ids[0], :]
    state = sin(x)[:, None, :]

    writer: protocols.MeshWriter = SummaryWriter()
    Exporter(writer).export("summary", state, grid, sample_count=5)

    # writers for other formats are created from file extensions
    Exporter(make_writer(".vtk")).export("sine", state, grid, field_names=["sin_x"])
