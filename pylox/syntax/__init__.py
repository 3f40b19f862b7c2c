'''Provides the lexer, parser and syntax tree of the expression language.'''
