"""
git-heatmap: a terminal calendar heatmap of commit activity.
"""

__version__ = "0.1.0"
