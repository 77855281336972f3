# cover_bot/states/user.py
from aiogram.fsm.state import State, StatesGroup


class CoverForm(StatesGroup):
    """Free-text input collection on the editor screen."""
    entering_field = State()
