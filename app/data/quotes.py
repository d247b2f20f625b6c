from typing import List

from app.models.mood import Quote

# Fallback quotes shown alongside the timer
QUOTES: List[Quote] = [
    Quote(text="Focus on progress, not perfection.", author="Anonymous"),
    Quote(text="The way to get started is to quit talking and begin doing.", author="Walt Disney"),
    Quote(text="Your limitation—it's only your imagination.", author="Anonymous"),
    Quote(text="Great things never come from comfort zones.", author="Anonymous"),
    Quote(text="The secret of getting ahead is getting started.", author="Mark Twain"),
    Quote(text="Don't watch the clock; do what it does. Keep going.", author="Sam Levenson"),
    Quote(text="The harder you work for something, the greater you'll feel when you achieve it.", author="Anonymous"),
    Quote(text="Dream bigger. Do bigger.", author="Anonymous"),
    Quote(text="Success doesn't just find you. You have to go out and get it.", author="Anonymous"),
    Quote(text="Sometimes we're tested not to show our weaknesses, but to discover our strengths.", author="Anonymous"),
    Quote(text="Don't stop when you're tired. Stop when you're done.", author="Anonymous"),
    Quote(text="Wake up with determination. Go to bed with satisfaction.", author="Anonymous"),
]
