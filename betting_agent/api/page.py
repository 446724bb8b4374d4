"""
Analysis page served at the site root.

Single HTML document with inline styles and script; it only calls
/api/leagues and /api/analyze.
"""

HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Football Betting Agent - Match Analysis</title>
    <meta name="description" content="Football match analysis and betting recommendations">
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: linear-gradient(135deg, #14532d 0%, #166534 50%, #064e3b 100%);
            min-height: 100vh;
            color: #1f2937;
            padding: 32px 16px;
        }
        .container { max-width: 900px; margin: 0 auto; }
        header { text-align: center; margin-bottom: 40px; color: #fff; }
        header h1 { font-size: 2.8em; margin-bottom: 12px; }
        header p { color: #dcfce7; font-size: 1.1em; }
        .card {
            background: #fff;
            border-radius: 16px;
            box-shadow: 0 20px 40px rgba(0,0,0,0.3);
            padding: 32px;
            margin-bottom: 32px;
        }
        .card h2 { margin-bottom: 24px; }
        .grid { display: grid; grid-template-columns: 1fr 1fr; gap: 24px; margin-bottom: 24px; }
        label { display: block; font-size: 0.9em; font-weight: 600; color: #374151; margin-bottom: 8px; }
        input, select {
            width: 100%;
            padding: 12px 16px;
            border: 2px solid #d1d5db;
            border-radius: 8px;
            font-size: 1em;
        }
        input:focus, select:focus { border-color: #16a34a; outline: none; }
        button {
            width: 100%;
            margin-top: 24px;
            padding: 16px;
            border: none;
            border-radius: 8px;
            background: linear-gradient(90deg, #16a34a, #059669);
            color: #fff;
            font-size: 1.1em;
            font-weight: 700;
            cursor: pointer;
        }
        button:disabled { opacity: 0.5; cursor: not-allowed; }
        .hidden { display: none; }
        .title { text-align: center; font-size: 1.9em; margin-bottom: 4px; }
        .subtitle { text-align: center; color: #6b7280; margin-bottom: 24px; }
        .odds { display: grid; grid-template-columns: repeat(3, 1fr); gap: 16px; margin-bottom: 32px; }
        .odds div { text-align: center; padding: 24px; border-radius: 12px; }
        .odds .label { font-size: 0.9em; font-weight: 600; margin-bottom: 8px; }
        .odds .value { font-size: 1.9em; font-weight: 700; }
        .odds .home { background: #dbeafe; color: #1d4ed8; }
        .odds .draw { background: #f3f4f6; color: #374151; }
        .odds .away { background: #fee2e2; color: #b91c1c; }
        .bet { border: 2px solid #22c55e; background: #f0fdf4; border-radius: 12px; padding: 24px; margin-bottom: 24px; }
        .bet-head { display: flex; justify-content: space-between; align-items: center; margin-bottom: 16px; }
        .badge { background: #16a34a; color: #fff; padding: 4px 12px; border-radius: 999px; font-weight: 700; }
        .bet-main { font-size: 1.5em; font-weight: 700; color: #15803d; margin-bottom: 8px; }
        section h4 { font-size: 1.25em; margin-bottom: 12px; }
        section { margin-bottom: 24px; }
        #analysis-text { line-height: 1.6; color: #374151; }
        #factors { list-style: none; }
        #factors li { margin-bottom: 8px; color: #374151; }
        #factors li::before { content: "\\2022"; color: #16a34a; margin-right: 8px; }
        .disclaimer {
            margin-top: 32px;
            padding: 16px;
            background: #fefce8;
            border: 1px solid #fde047;
            border-radius: 8px;
            color: #854d0e;
            font-size: 0.9em;
        }
        @media (max-width: 700px) {
            .grid, .odds { grid-template-columns: 1fr; }
        }
    </style>
</head>
<body>
    <div class="container">
        <header>
            <h1>&#9917; Football Betting Agent</h1>
            <p>Match Analysis &amp; Betting Recommendations</p>
        </header>

        <div class="card">
            <h2>Match Analysis</h2>
            <div class="grid">
                <div>
                    <label for="home-team">Home Team</label>
                    <input id="home-team" type="text" placeholder="e.g., Manchester United">
                </div>
                <div>
                    <label for="away-team">Away Team</label>
                    <input id="away-team" type="text" placeholder="e.g., Liverpool">
                </div>
            </div>
            <label for="league">League/Competition</label>
            <select id="league"><option>Premier League</option></select>
            <button id="analyze-btn" onclick="analyzeMatch()">Analyze Match</button>
        </div>

        <div id="result" class="card hidden">
            <h3 class="title" id="fixture"></h3>
            <p class="subtitle" id="fixture-league"></p>
            <div class="odds">
                <div class="home"><p class="label">Home Win</p><p class="value" id="odds-home"></p></div>
                <div class="draw"><p class="label">Draw</p><p class="value" id="odds-draw"></p></div>
                <div class="away"><p class="label">Away Win</p><p class="value" id="odds-away"></p></div>
            </div>
            <div class="bet">
                <div class="bet-head">
                    <h4>Recommended Bet</h4>
                    <span>Confidence: <span class="badge" id="confidence"></span></span>
                </div>
                <p class="bet-main" id="recommended-bet"></p>
                <p id="prediction"></p>
            </div>
            <section>
                <h4>Analysis</h4>
                <p id="analysis-text"></p>
            </section>
            <section>
                <h4>Key Factors</h4>
                <ul id="factors"></ul>
            </section>
            <div class="disclaimer">
                <strong>Disclaimer:</strong> This analysis is for informational purposes only.
                Gambling involves risk. Please bet responsibly and within your means.
            </div>
        </div>
    </div>

    <script>
        async function loadLeagues() {
            try {
                const response = await fetch('/api/leagues');
                const data = await response.json();
                const select = document.getElementById('league');
                select.innerHTML = '';
                data.leagues.forEach(l => {
                    const opt = document.createElement('option');
                    opt.value = l.name;
                    opt.textContent = l.name;
                    opt.selected = l.name === data.default_league;
                    select.appendChild(opt);
                });
            } catch (e) {
                console.error('Failed to load leagues', e);
            }
        }

        function setText(id, value) {
            document.getElementById(id).textContent = value;
        }

        function render(a) {
            setText('fixture', a.match.homeTeam + ' vs ' + a.match.awayTeam);
            setText('fixture-league', a.match.league);
            setText('odds-home', a.odds.home.toFixed(2));
            setText('odds-draw', a.odds.draw.toFixed(2));
            setText('odds-away', a.odds.away.toFixed(2));
            setText('confidence', a.confidence + '%');
            setText('recommended-bet', a.recommendedBet);
            setText('prediction', a.prediction);
            setText('analysis-text', a.analysis);
            const list = document.getElementById('factors');
            list.innerHTML = '';
            a.keyFactors.forEach(f => {
                const li = document.createElement('li');
                li.textContent = f;
                list.appendChild(li);
            });
            document.getElementById('result').classList.remove('hidden');
        }

        async function analyzeMatch() {
            const homeTeam = document.getElementById('home-team').value;
            const awayTeam = document.getElementById('away-team').value;
            const league = document.getElementById('league').value;
            if (!homeTeam || !awayTeam) {
                alert('Please enter both teams');
                return;
            }
            const btn = document.getElementById('analyze-btn');
            btn.disabled = true;
            btn.textContent = 'Analyzing Match...';
            try {
                const response = await fetch('/api/analyze', {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify({ homeTeam, awayTeam, league }),
                });
                const data = await response.json();
                if (!response.ok) {
                    alert(data.message || 'Failed to analyze match');
                    return;
                }
                render(data);
            } catch (error) {
                console.error('Error:', error);
                alert('Failed to analyze match');
            } finally {
                btn.disabled = false;
                btn.textContent = 'Analyze Match';
            }
        }

        loadLeagues();
    </script>
</body>
</html>
"""
