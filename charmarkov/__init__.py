from charmarkov.core.elements import START, END, Character, Element
from charmarkov.core.alphabet import Alphabet, build_alphabet
from charmarkov.core.matrix import TransitionMatrix
from charmarkov.analytics.markov import MarkovModel, empty, add, add_list, merge
from charmarkov.analytics.generation import PhraseSettings, phrase
from charmarkov.serialization import encode, decode, to_json, from_json
from charmarkov.errors import CharMarkovError, DecodeError, MatrixIndexError

__version__ = "0.1.0"
