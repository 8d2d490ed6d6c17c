"""Templated merchant lines chosen by action, mood, trust and personality."""
from __future__ import annotations

from stellar_bargains.core.rng import SeededRNG
from stellar_bargains.core.types import ActionType, MessageContext

TEMPLATES: dict[str, list[str]] = {
    "accept_positive": [
        "Excellent! I think we have a deal at {price} coins. Pleasure doing business!",
        "That works for me! {price} coins it is. You drive a fair bargain.",
        "I like your style. {price} coins and the {item} is yours!",
        "Perfect! {price} coins is exactly what I was hoping for. Deal!",
    ],
    "accept_neutral": [
        "Alright, {price} coins. Deal.",
        "Fine. {price} coins. Let's close this.",
        "{price} coins is acceptable. We have an agreement.",
        "I can work with {price} coins. Done.",
    ],
    "accept_reluctant": [
        "...Fine. {price} coins. But I'm not happy about it.",
        "You're pushing hard, but okay. {price} coins.",
        "Against my better judgment, {price} coins. Deal.",
        "I shouldn't do this, but... {price} coins. Take it.",
    ],
    "counter_greedy": [
        "Ha! {offer} coins? I'm thinking more like {counter} coins.",
        "Nice try. This {item} is worth {counter} coins at least.",
        "You're funny. Counter: {counter} coins.",
        "{offer}? Not even close. I need {counter} coins for this beauty.",
    ],
    "counter_honest": [
        "I appreciate the offer, but {counter} coins is closer to fair value.",
        "Let's be reasonable. How about {counter} coins?",
        "I can meet you at {counter} coins. That's fair for both of us.",
        "I understand your position. {counter} coins is my counteroffer.",
    ],
    "counter_impulsive": [
        "Whoa! {counter} coins! Take it or leave it!",
        "Nah, nah, nah. {counter} coins. Right now!",
        "I'm feeling {counter} coins. What do you say?",
        "Okay okay, {counter} coins! But you need to decide fast!",
    ],
    "counter_frustrated": [
        "We're wasting time. {counter} coins is my offer.",
        "Look, I'll go to {counter} coins but we need to wrap this up.",
        "I'm losing patience. {counter} coins. Final offer soon.",
        "This is taking too long. {counter} coins. Take it.",
    ],
    "counter_suspicious": [
        "I'm not sure I trust your assessment. {counter} coins.",
        "Something feels off here. I'll counter with {counter} coins.",
        "You're playing games. {counter} coins, and I'm watching you.",
        "I don't like this. {counter} coins is my counter.",
    ],
    "reject_polite": [
        "I'm sorry, but I can't accept that. Let's try another time.",
        "We couldn't reach an agreement. Perhaps next time.",
        "I respect your position, but I have to decline.",
        "Unfortunately, we're too far apart. Maybe another deal.",
    ],
    "reject_annoyed": [
        "This isn't working. I'm done here.",
        "No deal. We're too far apart.",
        "Forget it. I can't do this anymore.",
        "I'm out. This is a waste of time.",
    ],
    "reject_offended": [
        "Are you serious? That's insulting. We're done.",
        "I don't appreciate being played with. No deal.",
        "You've wasted my time with ridiculous offers. Goodbye.",
        "That's it. Your offers are an insult. I'm walking.",
    ],
    "bluff_detected": [
        "I can tell you're not being straight with me. That affects my trust.",
        "Those wild offers aren't helping your case.",
        "You keep changing your story. I'm getting suspicious.",
        "Stop playing games. Your inconsistency is noted.",
    ],
    "greeting": [
        "Welcome! Let's talk business.",
        "Good to see you. What's your offer?",
        "I'm listening. Make your pitch.",
        "Alright, let's negotiate.",
    ],
}

_PERSONALITY_POOLS = {
    "greedy": "counter_greedy",
    "honest": "counter_honest",
    "impulsive": "counter_impulsive",
}


class MessageGenerator:
    """Picks and fills a merchant line. Purely cosmetic."""

    def __init__(self, rng: SeededRNG):
        self.rng = rng

    def pool_for(self, ctx: MessageContext) -> str:
        """Name of the template pool for *ctx*.

        Draws once from the RNG when the player was caught bluffing.
        """
        if ctx.is_bluff and self.rng.random() > 0.5:
            return "bluff_detected"

        if ctx.action == ActionType.ACCEPT:
            if ctx.mood > 30:
                return "accept_positive"
            if ctx.mood < -30:
                return "accept_reluctant"
            return "accept_neutral"

        if ctx.action == ActionType.COUNTER:
            if ctx.trust < 30:
                return "counter_suspicious"
            if ctx.mood < -40:
                return "counter_frustrated"
            return _PERSONALITY_POOLS.get(ctx.personality.lower(), "accept_neutral")

        if ctx.is_bluff or ctx.trust < 20:
            return "reject_offended"
        if ctx.mood < -40:
            return "reject_annoyed"
        return "reject_polite"

    def generate(self, ctx: MessageContext) -> str:
        template = self.rng.choice(TEMPLATES[self.pool_for(ctx)])
        price = ctx.counter_offer if ctx.counter_offer is not None else ctx.offer
        counter = "" if ctx.counter_offer is None else ctx.counter_offer
        return template.format(
            price=_fmt(price),
            offer=_fmt(ctx.offer),
            counter=_fmt(counter),
            item=ctx.item_name,
        )

    def greeting(self) -> str:
        return self.rng.choice(TEMPLATES["greeting"])


def _fmt(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
