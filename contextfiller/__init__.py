# ContextFiller: context-aware placeholder text generator.
