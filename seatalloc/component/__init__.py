'''Components of the allocators, such as divisor sequences.'''
