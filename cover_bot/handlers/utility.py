# cover_bot/handlers/utility.py
from aiogram import Router
from aiogram.filters import Command
from aiogram.types import CallbackQuery, Message

from cover_bot.data.constants import SessionStep
from cover_bot.services.lifecycle import LifecycleController

router = Router(name="utility-handlers")

HELP_TEXT = (
    "<b>How it works</b>\n\n"
    "1. Press <i>Get started</i> and pick a template.\n"
    "2. Send me a photo (JPG or PNG) and fill in any text you like. "
    "Empty fields are written for you.\n"
    "3. Press <i>Generate</i>.\n"
    "4. Refine the result by describing a change, e.g. <i>\"add a sunset glow\"</i>.\n\n"
    "Send /cancel at any time to start from scratch."
)

_STEP_HINTS = {
    SessionStep.HERO: "Press <i>Get started</i> above, or send /start.",
    SessionStep.FILL_FORM: "Send me a photo or use the buttons on the editor to fill in your cover.",
    SessionStep.GENERATING: "⏳ I'm still working on your design, please wait.",
    SessionStep.SHOW_RESULT: "Describe the change you want in words, or use the buttons under your design.",
    SessionStep.ERROR: "Use the buttons above to try again or go back to the editor.",
}


@router.message(Command("help"))
async def help_cmd(msg: Message) -> None:
    await msg.answer(HELP_TEXT)


@router.message()
async def handle_unexpected_input(msg: Message, controller: LifecycleController) -> None:
    """
    Catches any input no other handler wanted and gently guides the user
    back to the interface.
    """
    await msg.answer(_STEP_HINTS.get(controller.step, "Send /start to begin."))


@router.callback_query()
async def handle_stale_button(cb: CallbackQuery) -> None:
    """Buttons left on screens the session has already moved past."""
    await cb.answer("This button is no longer active.")
