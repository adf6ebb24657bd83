"""
Progression Framework module.

Provides character progression built on top of the engine:
- Components (ProgressionState, a Pydantic model)
- Progression (levels, ranks, skills, mastery tracks, currencies)
- Save (persistence)
"""
