from .common import TrialEvaluator
from .placement import PlacementReport, candidate_positions, placement_search
