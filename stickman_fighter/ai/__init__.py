"""
AI System Module
"""

from stickman_fighter.ai.controller import AIController
from stickman_fighter.ai.decision import AIDecisionState, decide_action

__all__ = ['AIController', 'AIDecisionState', 'decide_action']
