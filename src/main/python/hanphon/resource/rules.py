# -*- coding: utf-8 -*-


"""
rule labels, representative sounds of final consonants, the final consonant guide and
the rule glossary
__copyright__ = 'Copyright (C) 2026-, hanphon authors. All rights reserved.'
"""


###########
# imports #
###########
from enum import Enum
from typing import List, Optional, Tuple

from hanphon.resource import jaso


#############
# constants #
#############
# rule labels written to trace records
RESYLLABIFICATION = 'Resyllabification'
RESYLLABIFICATION_COMPLEX = 'Resyllabification (Complex)'
H_DELETION = 'ㅎ-Deletion'
ASPIRATION = 'Aspiration'
PALATALIZATION = 'Palatalization'
LIQUIDIZATION = 'Liquidization'
NASALIZATION = 'Nasalization'
NASALIZATION_MUTUAL = 'Nasalization (Mutual)'
TENSIFICATION = 'Tensification'
SIMPLIFICATION = 'Simplification'
ACCEPTED_PRONUNCIATION = 'Exception (Accepted Pronunciation)'
COMPOUND_WORD = 'Compound Word Exception'


#########
# types #
#########
class Sound(Enum):
    """
    7 representative sounds (대표음) of final consonants.
    the value is the final consonant which stands for the class.
    """
    K = 'ㄱ'
    N = 'ㄴ'
    T = 'ㄷ'
    L = 'ㄹ'
    M = 'ㅁ'
    P = 'ㅂ'
    NG = 'ㅇ'

    @property
    def last(self) -> int:
        """
        final consonant index of the representative sound
        """
        return jaso.last_idx(self.value)


class RuleInfo:
    """
    glossary entry of a sound change rule
    """
    def __init__(self, id_: str, name: str, korean_name: str, description: str,
                 examples: List[Tuple[str, str, str]]):
        """
        Args:
            id_:  rule identifier
            name:  English name
            korean_name:  Korean name
            description:  explanation for learners
            examples:  list of (word, pronunciation, translation)
        """
        self.id = id_    # pylint: disable=invalid-name
        self.name = name
        self.korean_name = korean_name
        self.description = description
        self.examples = examples

    def __str__(self):
        examples = ', '.join(['{}[{}]'.format(word, sound) for word, sound, _ in self.examples])
        return '{} ({})\t{}\t{}'.format(self.name, self.korean_name, self.description, examples)


class SoundInfo:
    """
    reference entry of a representative sound and the final consonants read as it
    """
    def __init__(self, sound: Sound, romanization: str, lasts: str, note: str):
        """
        Args:
            sound:  representative sound
            romanization:  romanized sound
            lasts:  final consonants pronounced as the sound
            note:  explanation for learners
        """
        self.sound = sound
        self.romanization = romanization
        self.lasts = lasts
        self.note = note

    def __str__(self):
        return '{} ({})\t{}\t{}'.format(self.sound.value, self.romanization, ', '.join(self.lasts),
                                        self.note)


# 받침 대표음 안내표
SOUND_GUIDE = [
    SoundInfo(Sound.K, 'k', 'ㄱㄲㅋㄳㄺ', 'All these sound like "k" (stopped) at the end.'),
    SoundInfo(Sound.N, 'n', 'ㄴㄵㄶ', 'Sounds like "n".'),
    SoundInfo(Sound.T, 't', 'ㄷㅌㅅㅆㅈㅊㅎ', 'All these sound like "t" (stopped) at the end.'),
    SoundInfo(Sound.L, 'l', 'ㄹㄼㄽㄾㅀ', 'Sounds like "l".'),
    SoundInfo(Sound.M, 'm', 'ㅁㄻ', 'Sounds like "m".'),
    SoundInfo(Sound.P, 'p', 'ㅂㅍㅄㄿ', 'Sounds like "p" (stopped) at the end.'),
    SoundInfo(Sound.NG, 'ng', 'ㅇ', 'Sounds like "ng" (like in "sing").'),
]
# final consonant index -> representative sound. index 0 (no final) has none
_REPRESENTATIVE = [None, ] * len(jaso.LAST)
for _info in SOUND_GUIDE:
    for _last in _info.lasts:
        _REPRESENTATIVE[jaso.last_idx(_last)] = _info.sound
assert all(_REPRESENTATIVE[1:]), 'final consonant without representative sound'

GLOSSARY = [
    RuleInfo('resyllabification', 'Resyllabification (Liaison)', '연음 법칙',
             'When a syllable ends in a consonant and the next starts with a vowel (ㅇ), '
             'the consonant moves over to become the initial sound of the next syllable.',
             [('옷이', '오시', 'Clothes (subject)'),
              ('밥을', '바블', 'Rice/Meal (object)')]),
    RuleInfo('nasalization', 'Nasalization', '비음화',
             'Stop sounds (ㄱ, ㄷ, ㅂ) become nasal sounds (ㅇ, ㄴ, ㅁ) when followed by '
             'a nasal consonant (ㄴ, ㅁ).',
             [('국물', '궁물', 'Broth/Soup'),
              ('입니다', '임니다', 'To be (polite)'),
              ('닫는다', '단는다', 'Closing')]),
    RuleInfo('palatalization', 'Palatalization', '구개음화',
             'When ㄷ or ㅌ meets the vowel 이 (i), they change into ㅈ and ㅊ respectively.',
             [('같이', '가치', 'Together'),
              ('굳이', '구지', 'Obstinately/Dare to')]),
    RuleInfo('aspiration', 'Aspiration (H-Merger)', '격음화',
             'When ㅎ (h) meets a plain stop (ㄱ, ㄷ, ㅂ, ㅈ), they merge to form '
             'the aspirated version (ㅋ, ㅌ, ㅍ, ㅊ).',
             [('좋다', '조타', 'Good'),
              ('입학', '이팍', 'Admission (school)')]),
    RuleInfo('tensification', 'Tensification', '경음화',
             'After a stop sound (ㄱ, ㄷ, ㅂ), a following plain consonant (ㄱ, ㄷ, ㅂ, ㅅ, ㅈ) '
             'hardens into a double consonant.',
             [('학교', '학꾜', 'School'),
              ('식당', '식땅', 'Restaurant')]),
    RuleInfo('liquidization', 'Liquidization', '유음화',
             'When ㄴ and ㄹ meet, the ㄴ turns into ㄹ, making both sounds flow as '
             'a liquid L/R sound.',
             [('신라', '실라', 'Silla (Dynasty)'),
              ('관리', '괄리', 'Management')]),
]


#############
# functions #
#############
def representative(last: int) -> Optional[Sound]:
    """
    get representative sound of final consonant
    Args:
        last:  final consonant index [0, 27]
    Returns:
        representative sound. None for no final consonant
    """
    return _REPRESENTATIVE[last]
