"""
markov_writer

Word-level Markov chain text generation.
Contains:
 - chain construction from whitespace-tokenized text (core.chain_builder)
 - start-state heuristics and the random walk (core.start_selector, core.text_generator)
 - JSON persistence, config and logging helpers (utils)
 - the markov-writer command line (cli)
"""

__version__ = "0.1.0"
