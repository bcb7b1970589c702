"""
End-to-end analysis pipeline tying loading, text processing, sentiment
scoring and plotting together.
"""
