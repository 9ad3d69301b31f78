"""Command bodies.

Each handler mutates the game state when its preconditions hold and returns
the narrative lines for the transcript. None of them raise: an unmet
precondition is reported as a rejected result with the state left alone.
"""

from __future__ import annotations

from medrpg import config
from medrpg.commands.costs import COSTS, can_afford, rest_gain
from medrpg.commands.results import CommandOutcome, CommandResult
from medrpg.domain.enums import CommandName, QuestKey
from medrpg.state.quests import complete_quest
from medrpg.state.store import GameState

HELP_LINES = [
    "Available Commands:",
    "• status - View your current stamina and knowledge",
    "• quests - See your active quests",
    "• find coffee mug - Complete the coffee mug quest",
    "• study - Study to increase knowledge (costs stamina)",
    "• rest - Restore some stamina",
    "• inventory - Check your items (coming soon)",
    "• help - Show this help message",
]

INVENTORY_LINES = [
    "🎒 Your inventory:",
    "• Medical textbooks",
    "• Stethoscope",
    "• Notepad",
    "",
    "(Inventory system coming in future updates!)",
]

REST_FIRST = "Rest first to restore your stamina."


def _completion_line(title: str) -> str:
    return f"✅ Quest completed: {title}"


def show_help(state: GameState) -> CommandResult:
    return CommandResult(CommandName.HELP, CommandOutcome.SUCCESS, list(HELP_LINES))


def show_status(state: GameState) -> CommandResult:
    lines = [
        "=== Current Status ===",
        f"Stamina: {state.stamina}/{config.MAX_STAMINA}",
        f"Knowledge: {state.knowledge}",
    ]
    if state.stamina < config.TIRED_THRESHOLD:
        lines.append("")
        lines.append("⚠️ You're getting tired! Consider resting.")
    return CommandResult(CommandName.STATUS, CommandOutcome.SUCCESS, lines)


def show_quests(state: GameState) -> CommandResult:
    lines = ["=== Active Quests ==="]
    active = state.active_quests()
    if not active:
        lines.append("No active quests available.")
    for quest in active:
        lines.append(f"• {quest.title}")
        lines.append(f"  {quest.description}")
    completed = state.completed_quests()
    if completed:
        lines.append("")
        lines.append("=== Completed Quests ===")
        lines.extend(f"✅ {quest.title}" for quest in completed)
    return CommandResult(CommandName.QUESTS, CommandOutcome.SUCCESS, lines)


def find_coffee_mug(state: GameState) -> CommandResult:
    command = CommandName.FIND_COFFEE_MUG
    if state.incomplete_quest(QuestKey.FIND_COFFEE_MUG) is None:
        return CommandResult(
            command,
            CommandOutcome.REJECTED,
            ["You've already found the coffee mug, or that quest isn't available right now."],
        )
    cost = COSTS[command]
    if not can_afford(state.stamina, cost):
        return CommandResult(
            command,
            CommandOutcome.REJECTED,
            ["You're too tired to search properly.", REST_FIRST],
        )
    state.stamina -= cost.stamina
    quest = complete_quest(state, QuestKey.FIND_COFFEE_MUG)
    return CommandResult(
        command,
        CommandOutcome.SUCCESS,
        [
            "☕ You found the coffee mug hidden behind some textbooks!",
            "You feel slightly more awake.",
            "",
            _completion_line(quest.title),
        ],
        stamina_change=-cost.stamina,
        completed_quests=[quest],
    )


def study(state: GameState) -> CommandResult:
    command = CommandName.STUDY
    cost = COSTS[command]
    if not can_afford(state.stamina, cost):
        return CommandResult(
            command,
            CommandOutcome.REJECTED,
            ["You're too tired to focus on studying.", REST_FIRST],
        )
    state.stamina -= cost.stamina
    state.knowledge += cost.knowledge
    result = CommandResult(
        command,
        CommandOutcome.SUCCESS,
        [
            "📚 You spent an hour studying medical textbooks.",
            f"Your knowledge has increased by {cost.knowledge} points!",
            "You feel mentally sharper but physically tired.",
        ],
        stamina_change=-cost.stamina,
        knowledge_change=cost.knowledge,
    )
    quest = complete_quest(state, QuestKey.REVIEW_PATIENT_CHARTS)
    if quest is not None:
        result.lines.append("")
        result.lines.append(_completion_line(quest.title))
        result.completed_quests.append(quest)
    return result


def rest(state: GameState) -> CommandResult:
    gain = rest_gain(state.stamina)
    state.stamina += gain
    return CommandResult(
        CommandName.REST,
        CommandOutcome.SUCCESS,
        [
            f"😴 You take a well-deserved break and restore {gain} stamina.",
            f"Current stamina: {state.stamina}/{config.MAX_STAMINA}",
        ],
        stamina_change=gain,
    )


def show_inventory(state: GameState) -> CommandResult:
    return CommandResult(CommandName.INVENTORY, CommandOutcome.SUCCESS, list(INVENTORY_LINES))


def not_understood(raw: str) -> CommandResult:
    return CommandResult(
        None,
        CommandOutcome.UNRECOGNIZED,
        [f"❓ I don't understand '{raw}'.", "Type 'help' to see available commands."],
    )
