'''Provides the runtime values and the tree-walking evaluator.'''
