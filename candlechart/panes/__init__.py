"""Chart panes: price axis, info bar and volume histogram."""

from candlechart.panes.info_bar import InfoBar
from candlechart.panes.volume_pane import VolumePane
from candlechart.panes.y_axis import YAxis

__all__ = ["InfoBar", "VolumePane", "YAxis"]
