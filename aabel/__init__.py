from aabel.bits import BVec, Bit, Byte, Position
from aabel.counted_bag import CountedBag
from aabel.distances import (
    JaccardRatio, cosine, euclid, hamming, jaccard, jaccard_pairs,
    jaccard_ratio, manhattan
)
from aabel.permute import Permutations, permute, perms
from aabel.shingles import Shingles, shingles

__all__ = [
    "Bit",
    "Byte",
    "Position",
    "BVec",
    "CountedBag",
    "Shingles",
    "shingles",
    "Permutations",
    "permute",
    "perms",
    "JaccardRatio",
    "jaccard",
    "jaccard_pairs",
    "jaccard_ratio",
    "euclid",
    "manhattan",
    "cosine",
    "hamming",
]
