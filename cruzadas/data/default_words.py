"""Curated Portuguese word list with clues and categories."""

from __future__ import annotations

from typing import Tuple

# (word, clue, category)
DEFAULT_WORDS: Tuple[Tuple[str, str, str], ...] = (
    ("floresta", "Área com muitas árvores", "natureza"),
    ("terra", "Solo ou planeta", "natureza"),
    ("lago", "Corpo de água cercado por terra", "natureza"),
    ("vale", "Região entre montanhas", "natureza"),
    ("gelo", "Água congelada", "natureza"),
    ("vento", "Movimento do ar", "natureza"),
    ("nevoa", "Nuvem baixa sobre o solo", "natureza"),
    ("flores", "Parte colorida de algumas plantas", "natureza"),
    ("raiz", "Parte subterrânea de uma planta", "natureza"),
    ("orvalho", "Gotas d'água que se formam de manhã", "natureza"),
    ("rio", "Curso natural de água", "natureza"),
    ("correr", "Mover-se rapidamente com os pés", "acoes"),
    ("voar", "Deslocar-se pelo ar", "acoes"),
    ("ler", "Interpretar palavras escritas", "acoes"),
    ("comer", "Ingerir alimento", "acoes"),
    ("dormir", "Estado de repouso do corpo", "acoes"),
    ("beijar", "Tocar com os lábios em sinal de carinho", "acoes"),
    ("nadar", "Deslocar-se na água", "acoes"),
    ("cantar", "Emitir som com melodia", "acoes"),
    ("rir", "Demonstrar alegria com som", "acoes"),
    ("andar", "Mover-se caminhando", "acoes"),
    ("gato", "Animal doméstico que mia", "animais"),
    ("cao", "Melhor amigo do homem", "animais"),
    ("peixe", "Animal aquático com guelras", "animais"),
    ("cavalo", "Animal usado para montaria", "animais"),
    ("abelha", "Inseto que produz mel", "animais"),
    ("coruja", "Ave noturna com olhos grandes", "animais"),
    ("leao", "Animal considerado o rei da selva", "animais"),
    ("tartaruga", "Animal com casco duro", "animais"),
    ("cisne", "Ave aquática branca e elegante", "animais"),
    ("panda", "Urso que come bambu", "animais"),
    ("sofa", "Móvel para sentar", "objetos"),
    ("livro", "Conjunto de páginas escritas", "objetos"),
    ("lampada", "Objeto que emite luz", "objetos"),
    ("espelho", "Reflete a imagem", "objetos"),
    ("porta", "Entrada ou saída de um lugar", "objetos"),
    ("cobertor", "Usado para se aquecer", "objetos"),
    ("cadeira", "Objeto para sentar", "objetos"),
    ("fogao", "Usado para cozinhar", "objetos"),
    ("geladeira", "Conserva alimentos frios", "objetos"),
    ("telhado", "Cobre a casa", "objetos"),
    ("verde", "Cor da natureza", "cores"),
    ("azul", "Cor do céu", "cores"),
    ("amarelo", "Cor do sol", "cores"),
    ("roxo", "Mistura de azul com vermelho", "cores"),
    ("laranja", "Cor e também fruta", "cores"),
    ("preto", "Ausência de luz", "cores"),
    ("branco", "Todas as cores juntas na luz", "cores"),
    ("cinza", "Cor intermediária entre branco e preto", "cores"),
    ("bege", "Cor clara, parecida com areia", "cores"),
    ("dourado", "Cor de ouro", "cores"),
    ("alegria", "Sentimento de felicidade", "sentimentos"),
    ("raiva", "Emoção forte e irritada", "sentimentos"),
    ("amor", "Forte afeto por alguém", "sentimentos"),
    ("medo", "Sensação de perigo", "sentimentos"),
    ("tristeza", "Estado de desânimo", "sentimentos"),
    ("cansado", "Quando falta energia", "sentimentos"),
    ("ansiedade", "Preocupação excessiva", "sentimentos"),
    ("paz", "Ausência de conflito", "sentimentos"),
    ("feliz", "Quem está alegre", "sentimentos"),
    ("calma", "Estado de tranquilidade", "sentimentos"),
    ("verao", "Estação quente do ano", "clima"),
    ("outono", "Estação em que folhas caem", "clima"),
    ("inverno", "Estação fria do ano", "clima"),
    ("primavera", "Estação das flores", "clima"),
    ("calor", "Alta temperatura", "clima"),
    ("frio", "Baixa temperatura", "clima"),
    ("neve", "Água congelada que cai do céu", "clima"),
    ("chuva", "Gotas de água que caem do céu", "clima"),
    ("nublado", "Quando o céu está coberto", "clima"),
    ("seco", "Sem umidade", "clima"),
    ("pais", "Unidade territorial soberana", "geografia"),
    ("cidade", "Centro urbano", "geografia"),
    ("ilha", "Terra cercada de água", "geografia"),
    ("deserto", "Região árida", "geografia"),
    ("montanha", "Elevação natural do solo", "geografia"),
    ("planalto", "Terreno plano em altitude", "geografia"),
    ("litoral", "Região próxima ao mar", "geografia"),
    ("continente", "Grande massa de terra", "geografia"),
    ("vulcao", "Montanha que libera lava", "geografia"),
    ("brasil", "País onde ficam as Cataratas do Iguaçu", "geografia"),
    ("casa", "Local onde moramos", "objetos"),
    ("sol", "Estrela do nosso sistema solar", "natureza"),
    ("flor", "Parte colorida da planta", "natureza"),
    ("carro", "Veículo de quatro rodas", "objetos"),
    ("musica", "Arte dos sons organizados", "arte"),
    ("papel", "Material feito de celulose", "objetos"),
    ("escola", "Local de ensino", "lugares"),
    ("tempo", "Duração dos acontecimentos", "conceitos"),
    ("agua", "Líquido essencial para a vida", "natureza"),
    ("amigo", "Pessoa querida e próxima", "relacionamentos"),
    ("ponte", "Estrutura que atravessa obstáculos", "construcoes"),
    ("janela", "Abertura na parede para luz", "objetos"),
    ("mesa", "Móvel com tampo horizontal", "objetos"),
    ("noite", "Período de escuridão", "tempo"),
)

CATEGORIES = tuple(sorted({category for _, _, category in DEFAULT_WORDS}))
