"""In this example, we use nodalvtk to write a field defined on a grid of spectral elements"""

from numpy import exp, newaxis, stack

from nodalvtk import export, brick_grid
from nodalvtk.logging import StandardOutputLogger


if __name__ == "__main__":
    # 4 x 2 elements of polynomial order 4, where the last element is a halo element
    grid = brick_grid(order=4, elements_per_axis=(4, 2), upper_right=(2.0, 1.0), halo_elements=1)

    x = grid.geometry[:, grid.coordinate_ids[0], :]
    z = grid.geometry[:, grid.coordinate_ids[1], :]
    bubble = exp(-((x - 1.0)**2 + (z - 0.35)**2)/0.05)
    theta = 300.0 + 2.0*bubble

    # the state buffer has the layout (nodes per element, components, elements)
    state = stack([1.0 + 0.0*x, theta], axis=1)
    aux = bubble[:, newaxis, :]

    # write the raw nodal values (creates "bubble_raw.vtu")
    export("bubble_raw", state, grid, field_names=["rho", "theta"], logger=StandardOutputLogger())

    # resample each element on 8 x 8 equally spaced points (creates "bubble_lagrange.vtu")
    export(
        "bubble_lagrange", state, grid,
        field_names=["rho", "theta"],
        aux=aux,
        aux_field_names=["bubble"],
        sample_count=8,
        logger=StandardOutputLogger(verbosity_level=2),
    )
