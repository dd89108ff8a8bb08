from pallet_planner import plan_pallets
from pallet_planner.plot import SLOT_GRID, plot_pallet_layers
from pallet_planner.constants import COORDINATES


def test_slot_grid_covers_every_coordinate():
    assert set(SLOT_GRID) == set(COORDINATES)
    assert len(set(SLOT_GRID.values())) == len(COORDINATES)


def test_one_subplot_per_layer():
    orders = [{"po": "PO1", "lines": [{"sku": "A", "quantity": 1000}, {"sku": "B", "quantity": 50}]}]
    pallet = plan_pallets(orders)[0]
    assert pallet.layers == 4

    fig = plot_pallet_layers(pallet)

    visible = [ax for ax in fig.axes if ax.axison]
    assert len(fig.axes) == 6
    assert len(visible) == 4
    assert visible[0].get_title() == "Layer 1"
