"""Static reference text for rendering a psikogram.

``TRAITS`` is indexed like ``ResultRecord.scores``; ``INTERESTS`` is looked
up by RMIB category code. ``resolve_report`` merges a result with these
tables the way the report renderer does, so callers get plain data with
every default text filled in.
"""
from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from .engine import TRAIT_KEYS
from .types import ResultRecord

__all__ = [
    "TraitText",
    "InterestCategory",
    "Aspect",
    "TRAITS",
    "INTERESTS",
    "ASPECTS",
    "interest_by_code",
    "resolve_report",
]


class TraitText(NamedTuple):
    key: str
    name: str
    strength: str
    weakness: str
    recommendation: str


class InterestCategory(NamedTuple):
    name: str
    code: str
    description: str


class Aspect(NamedTuple):
    section: Optional[str]
    name: str
    description: str


_TRAIT_ROWS: Tuple[Tuple[str, str, str, str], ...] = (
    ("Kemampuan Umum",
     "Mampu menemukan solusi untuk berbagai masalah dengan efektif.",
     "Kesulitan menghadapi masalah yang sangat kompleks.",
     "Disarankan untuk melatih kemampuan pemecahan masalah dengan mengikuti simulasi kasus kompleks dan berpartisipasi dalam diskusi kelompok, sehingga dapat meningkatkan ketahanan dalam menghadapi tantangan yang lebih besar."),
    ("Daya Tangkap Visual",
     "Cepat mengenali pola dan perbedaan di lingkungan sekitar.",
     "Kurang perhatian terhadap detail yang lebih kecil, yang mempengaruhi hasil akhir.",
     "Sangat dianjurkan untuk mempraktikkan teknik mindfulness yang dapat membantu meningkatkan fokus terhadap detail kecil, sehingga hasil kerja dapat lebih maksimal dan akurat."),
    ("Kemampuan Berpikir Logis",
     "Mampu membuat keputusan berdasarkan alasan yang jelas dalam situasi tertentu.",
     "Kesulitan membuat keputusan cepat dalam situasi mendesak.",
     "Sebaiknya mengikuti pelatihan khusus yang dirancang untuk pengambilan keputusan di bawah tekanan, agar dapat meningkatkan kecepatan dan ketepatan dalam mengambil keputusan ketika situasi mendesak."),
    ("Kemampuan Berpikir Abstrak",
     "Mampu melihat hubungan antara berbagai hal dan memahami konsekuensi dari tindakan.",
     "Tantangan dalam menerjemahkan ide-ide abstrak ke dalam praktik.",
     "Disarankan untuk melakukan proyek kecil yang akan membantu menerapkan ide-ide abstrak ke dalam praktik nyata, sehingga dapat belajar dari pengalaman dan meningkatkan kemampuan penerapan ide."),
    ("Penalaran Verbal",
     "Mampu berkomunikasi dengan jelas dan efektif dalam interaksi.",
     "Kurang sabar dalam mendengarkan pandangan orang lain, yang menghambat komunikasi.",
     "Sangat bermanfaat untuk melatih keterampilan mendengarkan aktif melalui kegiatan role-playing, yang dapat meningkatkan kemampuan untuk menghargai pandangan orang lain dan memperbaiki komunikasi."),
    ("Penalaran Numerik",
     "Kemampuan memahami proses hitung dan berpikir teratur.",
     "Memerlukan waktu lebih lama untuk memahami konsep matematika yang lebih rumit.",
     "Disarankan untuk berlatih secara rutin dengan soal-soal matematika yang lebih kompleks, agar dapat meningkatkan kecepatan dan pemahaman dalam konsep yang rumit."),
    ("Hasrat Berprestasi",
     "Keinginan untuk mencapai dan meningkatkan prestasi.",
     "Beban ekspektasi tinggi dapat memengaruhi fokus dan kinerja.",
     "Sangat penting untuk menetapkan tujuan yang realistis dan melakukan evaluasi berkala, agar dapat menjaga motivasi dan fokus pada pencapaian yang lebih terukur."),
    ("Daya Tahan Stress",
     "Kemampuan mempertahankan kinerja.",
     "Kewalahan saat menghadapi tekanan yang berkepanjangan.",
     "Sebaiknya mempraktikkan teknik relaksasi dan manajemen waktu yang efektif, sehingga dapat mengurangi stres dan meningkatkan performa dalam menghadapi tekanan."),
    ("Kepercayaan Diri",
     "Adanya keyakinan terhadap kemampuan yang dimiliki.",
     "Kurang terbuka terhadap kritik konstruktif, yang menghambat perkembangan.",
     "Disarankan untuk secara rutin meminta umpan balik dari orang lain, sehingga dapat membangun kepercayaan diri yang lebih solid dan meningkatkan kemampuan untuk menerima kritik."),
    ("Relasi Sosial",
     "Kemampuan membina hubungan dengan orang lain.",
     "Canggung dalam situasi sosial baru, yang menghambat interaksi.",
     "Sangat dianjurkan untuk bergabung dengan kelompok sosial atau komunitas yang diminati, sehingga dapat berlatih keterampilan interaksi dan membangun hubungan yang lebih baik."),
    ("Kerjasama",
     "Kemampuan bekerjasama individu atau berkelompok.",
     "Kesulitan beradaptasi dengan dinamika kelompok yang berbeda.",
     "Disarankan untuk terlibat dalam berbagai aktivitas kelompok yang memerlukan kolaborasi, agar dapat meningkatkan kemampuan untuk beradaptasi dengan berbagai dinamika kelompok."),
    ("Sistematika Kerja",
     "Kemampuan membuat perencanaan & prioritas kerja.",
     "Terlalu fokus pada perencanaan, sehingga mengabaikan implementasi.",
     "Sebaiknya tentukan batas waktu untuk setiap fase implementasi, agar tidak terjebak dalam perencanaan yang berlarut-larut dan dapat segera memulai eksekusi."),
    ("Inisiatif",
     "Kemampuan mengambil tindakan yang diperlukan.",
     "Pengambilan keputusan yang terburu-buru berisiko tinggi.",
     "Disarankan untuk selalu mempertimbangkan pro dan kontra secara mendalam sebelum mengambil keputusan, agar dapat mengurangi risiko yang mungkin timbul dari keputusan yang terburu-buru."),
    ("Kemandirian",
     "Kemampuan mengambil sikap dan bekerja sendiri.",
     "Kesulitan dalam berkolaborasi dengan tim, yang dapat memengaruhi hasil kerja.",
     "Sangat penting untuk terlibat dalam proyek kolaboratif yang dapat membantu meningkatkan keterampilan kerja sama dan beradaptasi dalam lingkungan tim."),
)

TRAITS: Tuple[TraitText, ...] = tuple(
    TraitText(key, *row) for key, row in zip(TRAIT_KEYS, _TRAIT_ROWS)
)

INTERESTS: Tuple[InterestCategory, ...] = (
    InterestCategory("OUTDOOR", "OUT", "Minat ini melibatkan berbagai aktivitas yang dilakukan di luar ruangan, seperti kegiatan outbound yang meningkatkan keterampilan tim, travelling untuk menjelajahi tempat-tempat baru, dan eksplorasi pertambangan yang memberikan wawasan tentang sumber daya alam serta teknik penambangan."),
    InterestCategory("LITERATURE", "LITE", "Bidang ini berfokus pada literatur dan berbagai karya tulis, mencakup profesi seperti ahli perpustakaan yang bertanggung jawab untuk mengelola koleksi buku, serta petugas administrasi yang mendukung organisasi dan penyebaran informasi dalam institusi literasi."),
    InterestCategory("MECHANICAL", "MECH", "Minat ini terkait dengan ilmu mekanik dan teknik, yang mencakup berbagai disiplin seperti teknik mesin yang merancang dan memproduksi mesin, serta teknik sipil yang merencanakan dan membangun infrastruktur seperti jembatan dan gedung."),
    InterestCategory("MUSICAL", "MUS", "Minat di bidang musik ini mencakup kemampuan untuk menciptakan, memainkan, atau menginterpretasikan karya musik, yang bisa termasuk profesi seperti komposer yang merangkai melodi serta pemain musik yang tampil di berbagai acara dan pertunjukan."),
    InterestCategory("COMPUTATIONAL", "COMP", "Bidang ini berfokus pada keterampilan analisis dan perhitungan, mencakup profesi seperti akuntan yang bertanggung jawab untuk pencatatan dan pelaporan keuangan, serta ahli pembukuan yang mengelola catatan transaksi untuk bisnis dan organisasi."),
    InterestCategory("SOCIAL SERVICE", "SOS. WERV", "Minat ini berkaitan dengan pelayanan sosial dan komunitas, mencakup peran sebagai sukarelawan yang memberikan bantuan kepada yang membutuhkan, pekerja sosial yang membantu individu dan keluarga dalam kesulitan, serta psikolog yang memberikan dukungan mental dan emosional."),
    InterestCategory("SCIENTIFIC", "ACIE", "Minat di bidang scientific ini melibatkan penelitian dan eksperimen untuk mengembangkan pengetahuan baru, mencakup profesi seperti peneliti yang melakukan studi ilmiah dan ahli matematika yang menerapkan teori matematika dalam berbagai aplikasi praktis."),
    InterestCategory("CLERICAL", "CLER", "Bidang ini berfokus pada keterampilan administratif dan organisasi, mencakup peran sebagai sekretaris yang mengelola jadwal dan dokumen, serta notulen yang mendokumentasikan rapat dan kegiatan penting dalam suatu organisasi."),
    InterestCategory("PERSUASIVE", "PERS", "Minat ini berhubungan dengan kemampuan berkomunikasi dan mempengaruhi orang lain, mencakup profesi seperti ahli komunikasi yang merancang strategi komunikasi efektif, serta marketing yang mempromosikan produk dan layanan kepada konsumen."),
    InterestCategory("PRACTICAL", "PRAC", "Minat ini berfokus pada keterampilan praktis dan teknis, mencakup peran sebagai montir yang memperbaiki dan merawat kendaraan, serta ahli perbaikan mesin yang menangani berbagai masalah teknis pada peralatan dan alat-alat industri."),
    InterestCategory("AESTHETIC", "AESTH", "Minat ini mencakup kemampuan kreatif dalam seni dan desain, termasuk profesi seperti pelukis yang menciptakan karya seni visual, seniman patung yang membuat patung dari berbagai bahan, serta arsitek yang merancang bangunan dengan mempertimbangkan fungsi dan estetika."),
    InterestCategory("MEDICAL", "MED", "Minat ini berkaitan dengan bidang medis dan kesehatan, mencakup profesi seperti dokter yang mendiagnosis dan merawat penyakit, perawat yang memberikan perawatan langsung kepada pasien, serta ahli kesehatan yang berfokus pada pencegahan penyakit dan promosi kesehatan."),
)

ASPECTS: Tuple[Aspect, ...] = (
    Aspect("KEMAMPUAN", "Kemampuan Umum", "Mampu menemukan solusi untuk berbagai masalah dengan efektif."),
    Aspect(None, "Daya Tangkap Visual", "Cepat mengenali pola dan perbedaan di lingkungan sekitar."),
    Aspect(None, "Kemampuan Berpikir Logis", "Mampu membuat keputusan berdasarkan alasan yang jelas dalam situasi tertentu."),
    Aspect(None, "Kemampuan Berpikir Abstrak", "Mampu melihat hubungan antara berbagai hal dan memahami konsekuensi dari tindakan."),
    Aspect(None, "Penalaran Verbal", "Mampu berkomunikasi dengan jelas dan efektif dalam interaksi."),
    Aspect(None, "Penalaran Numerik", "Kemampuan memahami proses hitung dan berpikir teratur"),
    Aspect("KEPRIBADIAN", "Hasrat Berprestasi", "Keinginan untuk mencapai dan meningkatkan prestasi"),
    Aspect(None, "Daya Tahan Stress", "Kemampuan mempertahankan kinerja"),
    Aspect(None, "Kepercayaan Diri", "Adanya keyakinan terhadap kemampuan yang dimiliki"),
    Aspect(None, "Relasi Sosial", "Kemampuan membina hubungan dengan orang lain"),
    Aspect(None, "Kerjasama", "Kemampuan bekerjasama individu atau berkelompok"),
    Aspect("SIKAP KERJA", "Sistematika Kerja", "Kemampuan membuat perencanaan & prioritas kerja"),
    Aspect(None, "Inisiatif", "Kemampuan mengambil tindakan yang diperlukan"),
    Aspect(None, "Kemandirian", "Kemampuan mengambil sikap dan bekerja sendiri"),
)

_BY_CODE: Dict[str, InterestCategory] = {c.code: c for c in INTERESTS}


def interest_by_code(code: str) -> Optional[InterestCategory]:
    return _BY_CODE.get(code)


def _pick(override: Optional[str], default: str) -> str:
    return override if override is not None else default


def resolve_report(result: ResultRecord) -> Dict[str, Any]:
    """Fill every unset text slot of ``result`` from the static tables.

    Strengths follow the descending ranking; weaknesses and recommendations
    follow the ascending one. Interest entries fall back to their category.
    """

    def _texts(overrides, ranking, attr: str) -> List[str]:
        out: List[str] = []
        for i, override in enumerate(overrides):
            default = getattr(TRAITS[ranking[i].index], attr) if i < len(ranking) else ""
            out.append(_pick(override, default))
        return out

    interests: List[Dict[str, str]] = []
    for entry in result.interests:
        cat = interest_by_code(entry.code)
        interests.append({
            "code": entry.code,
            "name": _pick(entry.name_override, cat.name if cat else entry.code),
            "description": _pick(entry.description_override, cat.description if cat else ""),
        })

    aspects = [
        {"section": a.section, "name": a.name, "description": a.description, "score": result.scores[i]}
        for i, a in enumerate(ASPECTS)
    ]
    return {
        "aspects": aspects,
        "strengths": _texts(result.strengths, result.ranked_desc, "strength"),
        "weaknesses": _texts(result.weaknesses, result.ranked_asc, "weakness"),
        "recommendations": _texts(result.recommendations, result.ranked_asc, "recommendation"),
        "interests": interests,
    }
