"""
Command Line Interface Package

Command Structure:
- cardsync sync: scrape, match, review and commit against the live YNAB API
- cardsync match: offline matching against an exported transactions file
- cardsync settings: store the YNAB token, budget and account
- cardsync config / version: utility commands
"""
